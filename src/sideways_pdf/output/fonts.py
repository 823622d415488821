"""
Module: output.fonts

Purpose:
    Text width measurement with ReportLab font metrics, so wrapping
    matches what the renderer will draw.

Key Functions:
    - make_measurer(): Width function for a standard font

Dependencies:
    - reportlab.pdfbase.pdfmetrics: Font metrics
"""

from __future__ import annotations

from typing import Callable

from reportlab.pdfbase import pdfmetrics

from sideways_pdf.layout.config import DEFAULT_FONT_NAME, InvalidConfigurationError


def make_measurer(font_name: str = DEFAULT_FONT_NAME) -> Callable[[str, float], float]:
    """
    Build a (text, font_size) -> width function for a registered font.

    Raises:
        InvalidConfigurationError: If ReportLab does not know the font.

    Example:
        >>> measure = make_measurer("Helvetica")
        >>> measure("Hello", 10)
        22.78
    """
    try:
        pdfmetrics.getFont(font_name)
    except KeyError as e:
        raise InvalidConfigurationError(f"Unknown font: {font_name!r}") from e

    def measure(text: str, font_size: float) -> float:
        return pdfmetrics.stringWidth(text, font_name, font_size)

    return measure
