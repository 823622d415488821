"""
Module: output.renderer

Purpose:
    Render LayoutResult to PDF using ReportLab.
    Each PagePlan becomes one PDF page of the configured size with every
    TextRun drawn at its anchor and rotation.

Key Functions:
    - render_to_bytes(): Serialize layout to PDF bytes
    - render_to_pdf(): Write layout to a PDF file

Dependencies:
    - reportlab: PDF generation
    - layout.models: LayoutResult, PagePlan, TextRun

Used By:
    - controller: Conversion pipeline
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Optional

from reportlab.pdfgen import canvas

from sideways_pdf.layout.config import LayoutConfig
from sideways_pdf.layout.models import LayoutResult, PagePlan, TextRun

logger = logging.getLogger(__name__)


def render_to_bytes(
    layout: LayoutResult,
    config: LayoutConfig,
    *,
    title: Optional[str] = None,
) -> bytes:
    """
    Render layout result to PDF bytes.

    Args:
        layout: Layout result from layout_document()
        config: Layout configuration (page size, font, font size)
        title: Optional document title metadata

    Returns:
        Complete PDF document as bytes.

    Example:
        >>> data = render_to_bytes(layout, config)
        >>> data[:5]
        b'%PDF-'
    """
    if layout.page_count == 0:
        logger.warning("Empty layout, creating empty PDF")

    geometry = config.geometry
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer, pagesize=(geometry.width, geometry.height))
    if title:
        c.setTitle(title)

    for page in layout.pages:
        _render_page(c, page, config)
        c.showPage()

    c.save()

    logger.info(f"Rendered {layout.page_count} pages ({layout.total_runs} lines)")
    return buffer.getvalue()


def render_to_pdf(
    layout: LayoutResult,
    output_path: Path,
    config: LayoutConfig,
    *,
    title: Optional[str] = None,
) -> None:
    """
    Render layout result to a PDF file.

    Args:
        layout: Layout result from layout_document()
        output_path: Path to write PDF
        config: Layout configuration
        title: Optional document title metadata

    Raises:
        OSError: If the PDF cannot be written
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(render_to_bytes(layout, config, title=title))
    logger.info(f"Wrote {output_path}")


def _render_page(
    c: canvas.Canvas,
    page: PagePlan,
    config: LayoutConfig,
) -> None:
    """Draw every run of one page onto the current canvas page."""
    for run in page.runs:
        _draw_run(c, run, config)


def _draw_run(
    c: canvas.Canvas,
    run: TextRun,
    config: LayoutConfig,
) -> None:
    """
    Draw one rotated line.

    The coordinate system is moved to the anchor and turned by the run
    angle, so the string baseline starts at the anchor.
    """
    if not run.text:
        return

    c.saveState()
    c.translate(run.x, run.y)
    c.rotate(run.angle)
    c.setFont(config.font_name, config.font_size)
    c.drawString(0, 0, run.text)
    c.restoreState()
