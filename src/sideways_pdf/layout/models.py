"""
Module: layout.models

Purpose:
    Data models for sideways layout.
    Immutable dataclasses for positioned text runs and output pages.

Key Classes:
    - TextRun: One line of text at an anchor and angle
    - PagePlan: Runs for a single output page
    - LayoutResult: Final layout output

Dependencies:
    - dataclasses (std)

Used By:
    - layout.placement: Creates TextRuns
    - layout.assembler: Creates PagePlans and LayoutResult
    - output.renderer: Draws PagePlans
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

# A wrapped line is a plain string; an output page is an ordered tuple of them.
Line = str
OutputPage = Tuple[Line, ...]


@dataclass(frozen=True)
class TextRun:
    """
    A fully resolved instruction to draw one line.

    Attributes:
        text: Line to draw (may be empty for spacer lines)
        x: Anchor X coordinate in points (from page left)
        y: Anchor Y coordinate in points (from page bottom)
        angle: Rotation in degrees, positive is counter-clockwise

    Example:
        >>> TextRun(text="alpha", x=568.8, y=43.2, angle=90)
    """

    text: Line
    x: float
    y: float
    angle: float


@dataclass(frozen=True)
class PagePlan:
    """
    Layout plan for a single output page.

    Attributes:
        index: Output page number (0-indexed)
        source_page_index: Source page the lines came from (0-indexed)
        runs: Tuple of TextRuns in line order
    """

    index: int
    source_page_index: int
    runs: tuple[TextRun, ...]

    @property
    def line_count(self) -> int:
        """Number of lines on this page."""
        return len(self.runs)

    @property
    def lines(self) -> OutputPage:
        """Text of each run in order."""
        return tuple(run.text for run in self.runs)


@dataclass(frozen=True)
class LayoutResult:
    """
    Final layout output with diagnostics.

    Attributes:
        pages: Tuple of PagePlans in output order
        warnings: Oversized-line and other degradation messages
        source_page_map: Source page index -> output page indices

    Example:
        >>> result = LayoutResult(pages=(page1, page2))
        >>> result.page_count
        2
    """

    pages: tuple[PagePlan, ...]
    warnings: list[str] = field(default_factory=list)
    source_page_map: dict[int, list[int]] = field(default_factory=dict)

    @property
    def page_count(self) -> int:
        """Number of output pages."""
        return len(self.pages)

    @property
    def total_runs(self) -> int:
        """Total number of text runs across all pages."""
        return sum(p.line_count for p in self.pages)
