"""
Module: extraction

Purpose:
    Source document text extraction using PyMuPDF.

Key Functions:
    - extract_pages_text(): Text of every page in order
    - normalize_whitespace(): Collapse whitespace runs
"""

from .pdf_text import extract_pages_text, extract_page_text, normalize_whitespace

__all__ = [
    "extract_pages_text",
    "extract_page_text",
    "normalize_whitespace",
]
