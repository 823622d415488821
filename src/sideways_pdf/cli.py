"""
Module: cli

Purpose:
    Command line entry point: convert a PDF into a sideways text PDF.
    Parses layout options, configures logging and runs the conversion.

Key Functions:
    - build_parser(): argparse parser for the sideways-pdf command
    - main(): Entry point returning a process exit code

Dependencies:
    - argparse (std)
    - logging (std)
    - controller: convert_pdf(), ConversionError
    - config: ConverterConfig

Used By:
    - __main__: python -m sideways_pdf
    - run_sideways_pdf.py: Launcher without installation
    - sideways-pdf console script
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from sideways_pdf import __version__
from sideways_pdf.config import ConverterConfig, DEFAULT_PAGE_SIZE
from sideways_pdf.controller import ConversionError, convert_pdf
from sideways_pdf.layout.config import (
    DEFAULT_FONT_SIZE,
    DEFAULT_LEADING,
    DEFAULT_MARGIN_PT,
    InvalidConfigurationError,
    RotationDirection,
)

logger = logging.getLogger("sideways_pdf")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sideways-pdf",
        description="Re-typeset the text of a PDF as sideways lines on portrait pages.",
    )
    parser.add_argument("input", type=Path, help="Source PDF")
    parser.add_argument("-o", "--output", type=Path, default=None,
                        help="Output PDF (default: <input>_sideways_text.pdf)")
    parser.add_argument("--output-dir", type=Path, default=None,
                        help="Directory for the default output name")
    parser.add_argument("--direction", choices=[d.value for d in RotationDirection],
                        default=RotationDirection.COUNTER_CLOCKWISE.value,
                        help="Rotate text clockwise (cw) or counter-clockwise (ccw)")
    parser.add_argument("--font-size", type=float, default=DEFAULT_FONT_SIZE,
                        help=f"Font size in points (default: {DEFAULT_FONT_SIZE})")
    parser.add_argument("--leading", type=float, default=DEFAULT_LEADING,
                        help=f"Line pitch in points (default: {DEFAULT_LEADING})")
    parser.add_argument("--page-size", default=DEFAULT_PAGE_SIZE,
                        help=f"Output page size, e.g. letter, legal, a4 (default: {DEFAULT_PAGE_SIZE})")
    parser.add_argument("--margin", type=float, default=DEFAULT_MARGIN_PT,
                        help=f"Page margin in points (default: {DEFAULT_MARGIN_PT:.1f})")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = ConverterConfig(
            input_path=args.input,
            output_path=args.output,
            output_dir=args.output_dir,
            rotation=RotationDirection.parse(args.direction),
            font_size=args.font_size,
            leading=args.leading,
            page_size=args.page_size,
            margin=args.margin,
        )
    except InvalidConfigurationError as e:
        parser.error(str(e))

    try:
        result = convert_pdf(config)
    except ConversionError as e:
        logger.error(f"Error: {e}")
        return 1

    for warning in result.warnings:
        logger.debug(f"Layout warning: {warning}")
    print(f"Done: {result.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
