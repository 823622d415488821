"""
Unit tests for layout models.
"""

import dataclasses

import pytest

from sideways_pdf.layout import LayoutResult, PagePlan, TextRun


def _page(index: int, texts) -> PagePlan:
    runs = tuple(TextRun(text=t, x=100 - i * 10, y=10, angle=90) for i, t in enumerate(texts))
    return PagePlan(index=index, source_page_index=0, runs=runs)


class TestPagePlan:
    """Tests for PagePlan dataclass."""

    def test_lines_when_runs_then_texts_in_order(self):
        page = _page(0, ["a", "", "b"])
        assert page.lines == ("a", "", "b")
        assert page.line_count == 3

    def test_text_run_is_immutable(self):
        run = TextRun(text="a", x=1, y=2, angle=90)
        with pytest.raises(dataclasses.FrozenInstanceError):
            run.x = 5


class TestLayoutResult:
    """Tests for LayoutResult dataclass."""

    def test_counts_when_pages_then_summed(self):
        result = LayoutResult(pages=(_page(0, ["a", "b"]), _page(1, ["c"])))
        assert result.page_count == 2
        assert result.total_runs == 3
        assert result.warnings == []

    def test_counts_when_empty_then_zero(self):
        result = LayoutResult(pages=())
        assert result.page_count == 0
        assert result.total_runs == 0
