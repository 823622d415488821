"""
Module: layout

Purpose:
    Sideways text layout engine.
    Wraps source page text, paginates the lines and computes the
    rotated placement of every line on its output page.

Key Functions:
    - layout_document(): Main entry point for layout
    - wrap(): Greedy word wrap
    - paginate(): Fixed-capacity pagination
    - place(): Rotated line placement

Key Classes:
    - LayoutConfig: Configuration for page layout
    - PageGeometry: Output page dimensions
    - TextRun: Positioned line of text
    - PagePlan: Single page layout plan

Used By:
    - controller: Conversion pipeline
    - output.renderer: PDF rendering
"""

from .config import (
    InvalidConfigurationError,
    LayoutConfig,
    PageGeometry,
    RotationDirection,
)
from .models import TextRun, PagePlan, LayoutResult
from .wrapper import wrap
from .paginator import paginate
from .placement import place
from .assembler import build_header, layout_document

__all__ = [
    # Config
    "InvalidConfigurationError",
    "LayoutConfig",
    "PageGeometry",
    "RotationDirection",
    # Models
    "TextRun",
    "PagePlan",
    "LayoutResult",
    # Functions
    "wrap",
    "paginate",
    "place",
    "build_header",
    "layout_document",
]
