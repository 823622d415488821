"""
Module: layout.config

Purpose:
    Configuration for the sideways text layout engine.
    Defines output page geometry, line pitch, font size and the
    rotation applied to every text run.

Key Classes:
    - PageGeometry: Immutable output page dimensions and margin
    - LayoutConfig: Immutable layout configuration
    - RotationDirection: Clockwise / counter-clockwise text rotation
    - InvalidConfigurationError: Raised for unusable configurations

Dependencies:
    - dataclasses (std)
    - reportlab.lib.pagesizes: Named page sizes

Used By:
    - layout.paginator: Page capacity
    - layout.placement: Anchor geometry
    - layout.assembler: Wrap width and capacity
    - output.renderer: Page size and font
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

from reportlab.lib import pagesizes
from reportlab.lib.units import inch


# US Letter portrait in points
DEFAULT_PAGE_WIDTH_PT, DEFAULT_PAGE_HEIGHT_PT = pagesizes.LETTER
DEFAULT_MARGIN_PT = 0.6 * inch
DEFAULT_FONT_SIZE = 10
DEFAULT_LEADING = 12
DEFAULT_FONT_NAME = "Helvetica"


class InvalidConfigurationError(ValueError):
    """Layout configuration that can never produce a valid page."""
    pass


def _require_positive(name: str, value: float) -> None:
    """Reject zero, negative, NaN and infinite sizes."""
    if not math.isfinite(value) or value <= 0:
        raise InvalidConfigurationError(f"{name} must be a positive finite number: {value}")


class RotationDirection(Enum):
    """
    Direction the text is turned on the output page.

    Counter-clockwise text reads bottom-to-top, clockwise text reads
    top-to-bottom.
    """

    CLOCKWISE = "cw"
    COUNTER_CLOCKWISE = "ccw"

    @property
    def angle(self) -> int:
        """Rotation in degrees (positive is counter-clockwise)."""
        return -90 if self is RotationDirection.CLOCKWISE else 90

    @classmethod
    def parse(cls, value: Union["RotationDirection", str]) -> "RotationDirection":
        """
        Accept an enum member, its value ("cw"/"ccw") or its name.

        Raises:
            InvalidConfigurationError: If value names no direction.
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip()
        for member in cls:
            if key.lower() == member.value or key.upper() == member.name:
                return member
        raise InvalidConfigurationError(f"Unknown rotation direction: {value!r}")


@dataclass(frozen=True)
class PageGeometry:
    """
    Output page geometry in points (immutable).

    Text is rotated a quarter turn, so lines run along the page height
    and successive lines step across the page width.

    Attributes:
        width: Page width in points
        height: Page height in points
        margin: Margin applied on every side, in points

    Example:
        >>> geometry = PageGeometry()
        >>> geometry.max_line_width
        705.6
        >>> geometry.max_lines_per_page(14)
        37
    """

    width: float = DEFAULT_PAGE_WIDTH_PT
    height: float = DEFAULT_PAGE_HEIGHT_PT
    margin: float = DEFAULT_MARGIN_PT

    def __post_init__(self) -> None:
        """Validate geometry on construction."""
        _require_positive("width", self.width)
        _require_positive("height", self.height)
        _require_positive("margin", self.margin)
        if self.margin >= min(self.width, self.height) / 2:
            raise InvalidConfigurationError(
                f"margin {self.margin} leaves no usable area on a "
                f"{self.width}x{self.height} page"
            )

    @classmethod
    def from_page_size(cls, name: str, margin: float = DEFAULT_MARGIN_PT) -> "PageGeometry":
        """
        Build portrait geometry from a ReportLab page size name.

        Args:
            name: Page size such as "letter", "legal", "A4" (case-insensitive)
            margin: Margin in points

        Raises:
            InvalidConfigurationError: If the name is not a known page size.
        """
        size = getattr(pagesizes, name.strip().upper(), None)
        if not isinstance(size, tuple) or len(size) != 2:
            raise InvalidConfigurationError(f"Unknown page size: {name!r}")
        width, height = pagesizes.portrait(size)
        return cls(width=width, height=height, margin=margin)

    @property
    def max_line_width(self) -> float:
        """Usable extent along the rotated text axis (the page height)."""
        return self.height - 2 * self.margin

    def max_lines_per_page(self, leading: float) -> int:
        """Number of lines that fit across the page width at this leading."""
        return math.floor((self.width - 2 * self.margin) / leading)


@dataclass(frozen=True)
class LayoutConfig:
    """
    Configuration for sideways layout (immutable).

    Attributes:
        font_size: Font size in points
        leading: Distance between successive line anchors, in points
        rotation: Direction text is turned on the page
        geometry: Output page geometry
        font_name: Standard font used for measuring and drawing

    Example:
        >>> config = LayoutConfig(font_size=10, leading=14)
        >>> config.max_lines_per_page
        37
    """

    font_size: float = DEFAULT_FONT_SIZE
    leading: float = DEFAULT_LEADING
    rotation: RotationDirection = RotationDirection.COUNTER_CLOCKWISE
    geometry: PageGeometry = field(default_factory=PageGeometry)
    font_name: str = DEFAULT_FONT_NAME

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        _require_positive("font_size", self.font_size)
        _require_positive("leading", self.leading)
        if not isinstance(self.rotation, RotationDirection):
            raise InvalidConfigurationError(f"rotation must be a RotationDirection: {self.rotation!r}")
        if self.max_lines_per_page < 1:
            raise InvalidConfigurationError(
                f"leading {self.leading} is too large for the usable page width "
                f"{self.geometry.width - 2 * self.geometry.margin}"
            )

    @property
    def max_line_width(self) -> float:
        """Maximum measured width of a wrapped line."""
        return self.geometry.max_line_width

    @property
    def max_lines_per_page(self) -> int:
        """Lines per output page."""
        return self.geometry.max_lines_per_page(self.leading)
