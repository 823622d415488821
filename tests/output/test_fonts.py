"""
Unit tests for font measurement.
"""

import pytest

from sideways_pdf.layout import InvalidConfigurationError
from sideways_pdf.output import make_measurer


class TestMakeMeasurer:
    """Tests for make_measurer()."""

    def test_measure_when_helvetica_then_uses_afm_widths(self):
        """H(722) e(556) l(222) l(222) o(556) at 10pt."""
        measure = make_measurer("Helvetica")
        assert measure("Hello", 10) == pytest.approx(22.78)

    def test_measure_when_font_size_doubles_then_width_doubles(self):
        measure = make_measurer()
        assert measure("sideways", 20) == pytest.approx(2 * measure("sideways", 10))

    def test_measure_when_empty_then_zero(self):
        assert make_measurer()("", 12) == 0

    def test_make_measurer_when_unknown_font_then_raises(self):
        with pytest.raises(InvalidConfigurationError, match="Unknown font"):
            make_measurer("NoSuchFont-Regular")
