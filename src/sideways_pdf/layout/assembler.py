"""
Module: layout.assembler

Purpose:
    Lay out a whole document: a header block per source page followed
    by that page's wrapped text, paginated and placed.

Key Functions:
    - build_header(): Title, dash separator and blank spacer lines
    - layout_document(): Main entry point for layout

Dependencies:
    - layout.wrapper, layout.paginator, layout.placement
    - layout.config: LayoutConfig

Used By:
    - controller: Conversion pipeline
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from .config import LayoutConfig
from .models import Line, LayoutResult, PagePlan
from .paginator import paginate
from .placement import place
from .wrapper import wrap

logger = logging.getLogger(__name__)

HEADER_TEMPLATE = "{name} — extracted text (page {number})"
MAX_SEPARATOR_LENGTH = 80

# (text, font_size) -> width in points
Measurer = Callable[[str, float], float]


def build_header(display_name: str, page_number: int) -> List[Line]:
    """
    Header block for one source page.

    Args:
        display_name: Name shown for the source document (usually its file name)
        page_number: 1-based source page number

    Returns:
        [title, dashes, ""] where the dash line is min(len(title), 80) long.

    Example:
        >>> build_header("notes.pdf", 2)[0]
        'notes.pdf — extracted text (page 2)'
    """
    title = HEADER_TEMPLATE.format(name=display_name, number=page_number)
    return [title, "-" * min(len(title), MAX_SEPARATOR_LENGTH), ""]


def layout_document(
    pages_text: Sequence[Optional[str]],
    display_name: str,
    config: LayoutConfig,
    measure: Measurer,
) -> LayoutResult:
    """
    Lay out every source page as rotated, wrapped, paginated text.

    Each source page is paginated on its own; output pages accumulate
    in source page order.

    Args:
        pages_text: Plain text of each source page, in order (None counts as empty)
        display_name: Name used in each page header
        config: Layout configuration
        measure: Width of a string at a font size

    Returns:
        LayoutResult with one PagePlan per output page.

    Example:
        >>> result = layout_document(["hello world"], "a.pdf", LayoutConfig(), measure)
        >>> result.page_count
        1
    """
    max_width = config.max_line_width
    capacity = config.max_lines_per_page

    def measure_line(candidate: str) -> float:
        return measure(candidate, config.font_size)

    pages: List[PagePlan] = []
    warnings: List[str] = []
    source_page_map: dict[int, list[int]] = {}

    for source_index, text in enumerate(pages_text):
        body = wrap(text or "", max_width, measure_line)
        lines = build_header(display_name, source_index + 1) + body

        for line in body:
            if measure_line(line) > max_width:
                message = (
                    f"Source page {source_index + 1}: line {line[:40]!r} is wider than "
                    f"{max_width:.1f}pt and will overflow the margin"
                )
                logger.warning(message)
                warnings.append(message)

        for chunk in paginate(lines, capacity):
            runs = place(chunk, config.geometry, config.leading, config.rotation)
            page_index = len(pages)
            pages.append(PagePlan(
                index=page_index,
                source_page_index=source_index,
                runs=tuple(runs),
            ))
            source_page_map.setdefault(source_index, []).append(page_index)

        logger.debug(
            f"Source page {source_index + 1}: {len(body)} body lines -> "
            f"{len(source_page_map.get(source_index, []))} output pages"
        )

    logger.info(f"Laid out {len(pages_text)} source pages onto {len(pages)} output pages")

    return LayoutResult(
        pages=tuple(pages),
        warnings=warnings,
        source_page_map=source_page_map,
    )
