"""
Module: extraction.pdf_text

Purpose:
    Plain text extraction from an input PDF, one string per page.
    Reading order is whatever PyMuPDF reports; whitespace is collapsed
    so the layout engine only sees single-space separated words.

Key Functions:
    - extract_pages_text(): Text of every page in order
    - extract_page_text(): Text of a single page
    - normalize_whitespace(): Collapse whitespace runs

Dependencies:
    - fitz (PyMuPDF): PDF parsing and text extraction

Used By:
    - controller: Conversion pipeline
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import fitz

logger = logging.getLogger(__name__)


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim the ends."""
    return " ".join(text.split())


def extract_page_text(page: fitz.Page) -> str:
    """
    Extract normalised text from one page.

    Args:
        page: PyMuPDF page object.

    Returns:
        Single-spaced page text, empty string on error.
    """
    try:
        return normalize_whitespace(page.get_text("text") or "")
    except (RuntimeError, ValueError) as e:
        logger.warning(f"Failed to extract text from page {page.number + 1}: {e}")
        return ""


def extract_pages_text(pdf_path: Path) -> List[str]:
    """
    Extract the text of every page of a PDF.

    Args:
        pdf_path: Path to the source PDF.

    Returns:
        One string per page, in page order. Pages without text give "".

    Raises:
        FileNotFoundError: If pdf_path does not exist.
        fitz.FileDataError: If the file is not a readable document.

    Example:
        >>> extract_pages_text(Path("notes.pdf"))
        ['Arithmetic operators ...', '']
    """
    pages: List[str] = []
    with fitz.open(pdf_path) as doc:
        page_count = doc.page_count
        for page in doc:
            logger.debug(f"Extracting text... (page {page.number + 1}/{page_count})")
            pages.append(extract_page_text(page))

    logger.info(f"Extracted text from {len(pages)} pages of {pdf_path.name}")
    return pages
