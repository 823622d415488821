"""
Module: output

Purpose:
    PDF rendering for sideways layouts.
    Converts LayoutResult to PDF bytes or files using ReportLab.

Key Functions:
    - render_to_bytes(): Render layout to PDF bytes
    - render_to_pdf(): Render layout to a PDF file
    - make_measurer(): Font width measurement

Dependencies:
    - reportlab: PDF generation and font metrics
    - layout.models: LayoutResult
"""

from .fonts import make_measurer
from .renderer import render_to_bytes, render_to_pdf

__all__ = [
    "make_measurer",
    "render_to_bytes",
    "render_to_pdf",
]
