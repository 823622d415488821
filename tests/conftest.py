import pytest
import sys
from pathlib import Path

import fitz

# Add src to sys.path so we can import sideways_pdf
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
def char_width(text: str, font_size: float = 1) -> float:
    """Deterministic measurer: one unit per character, ignoring font size."""
    return len(text)


@pytest.fixture
def measure():
    """(text, font_size) -> width stub used instead of real font metrics."""
    return char_width


@pytest.fixture
def make_pdf(tmp_path: Path):
    """Factory writing a small PDF with one text string per page."""
    def _create(pages_text, name: str = "sample.pdf") -> Path:
        pdf_path = tmp_path / name
        doc = fitz.open()
        for text in pages_text:
            page = doc.new_page(width=612, height=792)
            if text:
                page.insert_text((72, 72), text, fontsize=11)
        doc.save(pdf_path)
        doc.close()
        return pdf_path
    return _create
