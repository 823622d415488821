"""
Module: controller

Purpose:
    Orchestrate the complete conversion pipeline.
    Extract → Wrap → Paginate → Place → Render

Key Functions:
    - convert_pdf(): Main entry point for converting a PDF file
    - build_sideways_pdf(): In-memory layout and rendering of extracted text

Key Classes:
    - ConversionResult: Complete conversion result
    - ConversionError: Exception for conversion failures

Dependencies:
    - extraction: Source text extraction
    - layout: Wrapping, pagination and placement
    - output: PDF rendering

Used By:
    - cli: Command line entry point
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

import fitz

from .config import ConverterConfig
from .extraction import extract_pages_text
from .layout import LayoutConfig, LayoutResult, layout_document
from .output import make_measurer, render_to_bytes

logger = logging.getLogger(__name__)


class ConversionError(Exception):
    """Error during conversion pipeline."""
    pass


@dataclass(frozen=True)
class ConversionResult:
    """
    Complete conversion result (immutable).

    Attributes:
        output_path: Path to generated sideways PDF
        source_page_count: Pages read from the input
        page_count: Pages written to the output
        warnings: Layout warnings (oversized lines)
        elapsed_seconds: Wall time of the conversion

    Example:
        >>> result = convert_pdf(config)
        >>> print(f"Wrote {result.page_count} pages to {result.output_path}")
    """
    output_path: Path
    source_page_count: int
    page_count: int
    warnings: tuple[str, ...]
    elapsed_seconds: float


def build_sideways_pdf(
    pages_text: Sequence[Optional[str]],
    display_name: str,
    layout_config: LayoutConfig,
) -> Tuple[bytes, LayoutResult]:
    """
    Lay out extracted text and render it to PDF bytes.

    Args:
        pages_text: Plain text per source page, in order
        display_name: Name used in page headers
        layout_config: Layout configuration

    Returns:
        (pdf_bytes, layout) tuple.

    Example:
        >>> data, layout = build_sideways_pdf(["some text"], "a.pdf", LayoutConfig())
        >>> layout.page_count
        1
    """
    measure = make_measurer(layout_config.font_name)
    layout = layout_document(pages_text, display_name, layout_config, measure)
    data = render_to_bytes(
        layout,
        layout_config,
        title=f"{display_name} (sideways text)",
    )
    return data, layout


def convert_pdf(config: ConverterConfig) -> ConversionResult:
    """
    Convert a PDF into a sideways text PDF.

    Pipeline:
    1. Extract plain text from each source page
    2. Wrap, paginate and place each page's text
    3. Render to PDF and write the output file

    Args:
        config: Conversion configuration

    Returns:
        ConversionResult with output path and counts

    Raises:
        ConversionError: If the input cannot be read or the output cannot be written
    """
    start_time = time.perf_counter()
    input_path = config.input_path
    output_path = config.resolved_output_path

    if not input_path.is_file():
        raise ConversionError(f"Input PDF not found: {input_path}")

    logger.info(f'Reading "{input_path.name}"...')

    # 1. Extract
    logger.info("Extracting text...")
    try:
        pages_text = extract_pages_text(input_path)
    except (fitz.FileDataError, RuntimeError, ValueError) as e:
        raise ConversionError(f"Failed to read {input_path.name}: {e}") from e

    # 2-3. Layout and render
    logger.info("Generating sideways PDF...")
    data, layout = build_sideways_pdf(pages_text, config.display_name, config.layout_config())

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    except OSError as e:
        raise ConversionError(f"Failed to write {output_path}: {e}") from e

    elapsed = time.perf_counter() - start_time
    logger.info(f"Done: wrote {output_path.name} ({layout.page_count} pages) in {elapsed:.2f}s")

    return ConversionResult(
        output_path=output_path,
        source_page_count=len(pages_text),
        page_count=layout.page_count,
        warnings=tuple(layout.warnings),
        elapsed_seconds=elapsed,
    )
