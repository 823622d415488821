"""
Module: layout.paginator

Purpose:
    Split wrapped lines onto fixed-capacity output pages.

Key Functions:
    - paginate(): Chunk lines into pages of at most `capacity` lines

Algorithm:
    Consecutive chunks of exactly `capacity` lines, the last chunk
    holding the remainder. No reordering and no merging of short
    chunks. Each source page is paginated on its own, so lines from
    different source pages never share an output page.

Dependencies:
    - layout.models: OutputPage

Used By:
    - layout.assembler: Per source page pagination
"""

from __future__ import annotations

import logging
from typing import List, Sequence

from .config import InvalidConfigurationError
from .models import Line, OutputPage

logger = logging.getLogger(__name__)


def paginate(
    lines: Sequence[Line],
    capacity: int,
) -> List[OutputPage]:
    """
    Arrange lines onto pages of at most `capacity` lines.

    Blank lines are kept as-is. An empty input produces no pages.

    Args:
        lines: Lines in reading order
        capacity: Maximum lines per page (>= 1)

    Returns:
        Pages in order; every page but the last holds exactly `capacity` lines.

    Raises:
        InvalidConfigurationError: If capacity < 1.

    Example:
        >>> [len(p) for p in paginate(["a"] * 7, 3)]
        [3, 3, 1]
    """
    if capacity < 1:
        raise InvalidConfigurationError(f"capacity must be at least 1: {capacity}")

    pages: List[OutputPage] = [
        tuple(lines[start:start + capacity])
        for start in range(0, len(lines), capacity)
    ]

    logger.debug(f"Paginated {len(lines)} lines onto {len(pages)} pages (capacity {capacity})")
    return pages
