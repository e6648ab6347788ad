"""Unit tests for unit conversions."""

import pytest

from engrave.core.units import (
    MM_PER_POINT,
    design_units_to_mm,
    mm_to_font_size,
    points_per_design_unit,
    points_to_mm,
    round_mm,
)


class TestConversions:
    """Tests for mm / point / design-unit conversions."""

    def test_one_inch(self):
        """25.4 mm is one inch, which is 72 points."""
        assert mm_to_font_size(25.4) == pytest.approx(72.0)
        assert points_to_mm(72.0) == pytest.approx(25.4)

    def test_round_trip(self):
        """Converting mm -> pt -> mm returns the input."""
        for mm in (0.0, 0.5, 10.0, 123.456):
            assert points_to_mm(mm_to_font_size(mm)) == pytest.approx(mm)

    def test_mm_per_point(self):
        assert MM_PER_POINT == pytest.approx(0.352777, rel=1e-5)

    def test_points_per_design_unit(self):
        """A 1000 UPM font at 72 pt maps one unit to 0.072 pt."""
        assert points_per_design_unit(25.4, 1000) == pytest.approx(0.072)

    def test_em_maps_to_height(self):
        """A full em in design units is exactly the requested height."""
        assert design_units_to_mm(1000, 1000, 10.0) == pytest.approx(10.0)
        assert design_units_to_mm(2048, 2048, 7.5) == pytest.approx(7.5)
        assert design_units_to_mm(500, 1000, 10.0) == pytest.approx(5.0)


class TestRoundMm:
    """Tests for output rounding."""

    def test_default_precision(self):
        assert round_mm(1.23456) == 1.235
        assert round_mm(1.0004) == 1.0

    def test_half_rounds_up(self):
        assert round_mm(2.5, decimals=0) == 3.0
        assert round_mm(-2.5, decimals=0) == -2.0

    def test_decimals(self):
        assert round_mm(3.14159, decimals=2) == 3.14
