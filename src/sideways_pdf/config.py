"""
Module: config

Purpose:
    Configuration dataclass for the conversion pipeline. Immutable
    configuration with validation on construction.

Key Classes:
    - ConverterConfig: Input, output and layout settings for one conversion

Dependencies:
    - dataclasses (std)
    - pathlib (std)
    - layout.config: LayoutConfig, PageGeometry, RotationDirection

Used By:
    - controller: convert_pdf()
    - cli: Command line entry point
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sideways_pdf.layout.config import (
    DEFAULT_FONT_NAME,
    DEFAULT_FONT_SIZE,
    DEFAULT_LEADING,
    DEFAULT_MARGIN_PT,
    InvalidConfigurationError,
    LayoutConfig,
    PageGeometry,
    RotationDirection,
)

OUTPUT_SUFFIX = "_sideways_text.pdf"
DEFAULT_PAGE_SIZE = "letter"

_PDF_EXTENSION = re.compile(r"\.pdf$", re.IGNORECASE)


@dataclass(frozen=True)
class ConverterConfig:
    """
    Configuration for converting one PDF (immutable).

    Attributes:
        input_path: Source PDF
        output_path: Explicit output file (overrides output_dir)
        output_dir: Directory for the default output name
        rotation: Direction text is turned
        font_size: Font size in points
        leading: Line pitch in points
        page_size: ReportLab page size name for output pages
        margin: Page margin in points
        font_name: Standard font for measuring and drawing

    Example:
        >>> config = ConverterConfig(input_path=Path("notes.pdf"))
        >>> config.resolved_output_path
        PosixPath('notes_sideways_text.pdf')
    """

    # Required
    input_path: Path

    # Output
    output_path: Optional[Path] = None
    output_dir: Optional[Path] = None

    # Layout
    rotation: RotationDirection = RotationDirection.COUNTER_CLOCKWISE
    font_size: float = DEFAULT_FONT_SIZE
    leading: float = DEFAULT_LEADING
    page_size: str = DEFAULT_PAGE_SIZE
    margin: float = DEFAULT_MARGIN_PT
    font_name: str = DEFAULT_FONT_NAME

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        # Raises InvalidConfigurationError for unusable layout values
        self.layout_config()

    @property
    def display_name(self) -> str:
        """Source file name as shown in page headers."""
        return self.input_path.name

    @property
    def resolved_output_path(self) -> Path:
        """Output file, defaulting to <stem>_sideways_text.pdf beside the input."""
        if self.output_path is not None:
            return self.output_path
        directory = self.output_dir if self.output_dir is not None else self.input_path.parent
        return directory / default_output_name(self.input_path.name)

    def layout_config(self) -> LayoutConfig:
        """
        Build the layout configuration.

        Raises:
            InvalidConfigurationError: If any layout value is unusable.
        """
        geometry = PageGeometry.from_page_size(self.page_size, margin=self.margin)
        return LayoutConfig(
            font_size=self.font_size,
            leading=self.leading,
            rotation=RotationDirection.parse(self.rotation),
            geometry=geometry,
            font_name=self.font_name,
        )


def default_output_name(input_name: str) -> str:
    """
    Output file name for a source file name.

    Example:
        >>> default_output_name("Notes.PDF")
        'Notes_sideways_text.pdf'
    """
    stem = _PDF_EXTENSION.sub("", input_name)
    if not stem:
        raise InvalidConfigurationError(f"Cannot derive output name from {input_name!r}")
    return stem + OUTPUT_SUFFIX
