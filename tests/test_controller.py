"""
Tests for the conversion controller.

Runs the full pipeline on small PDFs generated with PyMuPDF.
"""

import pytest

import fitz

from sideways_pdf.config import ConverterConfig
from sideways_pdf.controller import (
    ConversionError,
    ConversionResult,
    build_sideways_pdf,
    convert_pdf,
)
from sideways_pdf.layout import LayoutConfig, RotationDirection


class TestBuildSidewaysPdf:
    """Tests for build_sideways_pdf()."""

    def test_build_when_text_pages_then_bytes_and_layout_agree(self):
        # Act
        data, layout = build_sideways_pdf(["alpha beta", "gamma"], "doc.pdf", LayoutConfig())

        # Assert
        assert layout.page_count == 2
        with fitz.open(stream=data, filetype="pdf") as doc:
            assert doc.page_count == 2
            assert doc.metadata["title"] == "doc.pdf (sideways text)"

    def test_build_when_long_text_then_wraps_within_line_width(self):
        """Every measured body line fits the rotated width unless it is one token."""
        # Arrange
        from sideways_pdf.output import make_measurer
        config = LayoutConfig(font_size=12, leading=14)
        measure = make_measurer(config.font_name)
        text = " ".join(["sideways"] * 400)

        # Act
        _, layout = build_sideways_pdf([text], "doc.pdf", config)

        # Assert
        lines = [line for page in layout.pages for line in page.lines][3:]
        assert len(lines) > 1
        assert all(measure(line, 12) <= config.max_line_width for line in lines)
        assert " ".join(lines).split() == text.split()


class TestConvertPdf:
    """Tests for convert_pdf()."""

    def test_convert_when_valid_pdf_then_writes_default_output(self, make_pdf):
        # Arrange
        pdf_path = make_pdf(["Page one text", "Page two text"], name="Lesson.pdf")
        config = ConverterConfig(input_path=pdf_path)

        # Act
        result = convert_pdf(config)

        # Assert
        assert isinstance(result, ConversionResult)
        assert result.output_path == pdf_path.parent / "Lesson_sideways_text.pdf"
        assert result.output_path.exists()
        assert result.source_page_count == 2
        assert result.page_count == 2
        assert result.warnings == ()
        with fitz.open(result.output_path) as doc:
            assert doc.page_count == 2
            text = " ".join(doc[1].get_text("text").split())
        assert "Lesson.pdf" in text
        assert "Page two text" in text

    def test_convert_when_output_dir_given_then_writes_there(self, make_pdf, tmp_path):
        pdf_path = make_pdf(["x"])
        out_dir = tmp_path / "exports"
        result = convert_pdf(ConverterConfig(input_path=pdf_path, output_dir=out_dir))
        assert result.output_path == out_dir / "sample_sideways_text.pdf"
        assert result.output_path.exists()

    def test_convert_when_clockwise_then_still_one_page_per_source_page(self, make_pdf, tmp_path):
        pdf_path = make_pdf(["a", "b", "c"])
        config = ConverterConfig(
            input_path=pdf_path,
            output_path=tmp_path / "cw.pdf",
            rotation=RotationDirection.CLOCKWISE,
        )
        result = convert_pdf(config)
        assert result.page_count == 3

    def test_convert_when_input_missing_then_raises_conversion_error(self, tmp_path):
        config = ConverterConfig(input_path=tmp_path / "missing.pdf")
        with pytest.raises(ConversionError, match="not found"):
            convert_pdf(config)

    def test_convert_when_input_not_pdf_then_raises_conversion_error(self, tmp_path):
        # Arrange
        bogus = tmp_path / "bogus.pdf"
        bogus.write_bytes(b"this is not a pdf")

        # Act & Assert
        with pytest.raises(ConversionError, match="Failed to read") as exc_info:
            convert_pdf(ConverterConfig(input_path=bogus))
        assert exc_info.value.__cause__ is not None
