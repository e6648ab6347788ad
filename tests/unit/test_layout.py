"""Unit tests for the layout engine.

Uses the FakeFont fixture (1000 UPM) so that at 10 mm height one design
unit is 0.01 mm: H advances 6 mm, I advances 3 mm, space 2.5 mm.
"""

from unittest.mock import MagicMock

import pytest

from engrave.config import LayoutConfig, OriginPolicy
from engrave.core.layout import LayoutEngine, apply_origin, origin_offset, split_lines
from engrave.domain import BoundingBox, CoordinateSpace, Point
from engrave.exceptions import ConfigurationError
from engrave.utils import RenderLogger


def _layout(font, text, **config):
    return LayoutEngine(font, LayoutConfig(**config)).layout(text)


class TestSplitLines:
    """Tests for line splitting."""

    def test_lf_and_crlf(self):
        assert split_lines("a\nb\r\nc") == ["a", "b", "c"]

    def test_single_line(self):
        assert split_lines("abc") == ["abc"]

    def test_empty(self):
        assert split_lines("") == [""]


class TestAdvance:
    """Tests for cursor advance."""

    def test_two_glyphs_no_kerning(self, fake_font):
        """The second cursor is the first glyph's scaled advance width."""
        result = _layout(fake_font, "HI")
        h, i = result.glyphs

        assert h.cursor.x == pytest.approx(0.0)
        assert h.advance == pytest.approx(6.0)
        assert i.cursor.x == pytest.approx(6.0)
        assert h.bbox.max_x < i.bbox.min_x
        assert fake_font.kerning_calls == []

    def test_kerning_applied(self, fake_font):
        result = _layout(fake_font, "HI", kerning=True)
        assert result.glyphs[1].cursor.x == pytest.approx(5.0)
        assert ("H", "I") in fake_font.kerning_calls

    def test_letter_spacing(self, fake_font):
        result = _layout(fake_font, "HI", letter_spacing_mm=1.0)
        assert result.glyphs[1].cursor.x == pytest.approx(7.0)

    def test_kerning_and_letter_spacing(self, fake_font):
        result = _layout(fake_font, "HI", kerning=True, letter_spacing_mm=0.5)
        assert result.glyphs[1].cursor.x == pytest.approx(5.5)

    def test_height_scales_advance(self, fake_font):
        result = _layout(fake_font, "HI", height_mm=20.0)
        assert result.glyphs[1].cursor.x == pytest.approx(12.0)
        assert result.height_mm == 20.0

    def test_space_has_no_geometry(self, fake_font):
        result = _layout(fake_font, "H I")
        h, space, i = result.glyphs

        assert not space.has_geometry()
        assert space.bbox is None
        assert i.cursor.x == pytest.approx(8.5)

    def test_paths_in_millimetres(self, fake_font):
        result = _layout(fake_font, "H")
        glyph = result.glyphs[0]
        assert glyph.path.space == CoordinateSpace.MILLIMETERS
        assert glyph.bbox.max_x == pytest.approx(5.0)
        assert glyph.bbox.max_y == pytest.approx(7.0)


class TestLines:
    """Tests for multi-line layout."""

    def test_line_spacing(self, fake_font):
        """The second baseline is exactly line_spacing below the first."""
        result = _layout(fake_font, "H\nI", line_spacing_mm=5.0)
        first, second = result.lines

        assert first.baseline_y == pytest.approx(0.0)
        assert second.baseline_y - first.baseline_y == pytest.approx(-5.0)
        assert second.glyphs[0].cursor == Point(0.0, second.baseline_y)

    def test_default_line_spacing(self, fake_font):
        result = _layout(fake_font, "H\nI")
        assert result.lines[1].baseline_y == pytest.approx(-12.0)

    def test_cursor_resets_per_line(self, fake_font):
        result = _layout(fake_font, "HH\r\nI")
        assert result.lines[1].glyphs[0].cursor.x == pytest.approx(0.0)

    def test_empty_text(self, fake_font):
        result = _layout(fake_font, "")
        assert len(result.lines) == 1
        assert result.glyphs == ()
        assert result.bbox is None


class TestMissingGlyphs:
    """Tests for characters the font cannot map."""

    def test_missing_char_skipped(self, fake_font):
        """One fewer path than characters; the fallback advance is still applied."""
        text = "H\U0001F600I"
        result = _layout(fake_font, text)

        assert len(result.glyphs) == len(text) - 1
        assert result.missing == ("\U0001F600",)
        assert result.glyphs[1].cursor.x == pytest.approx(6.0 + 2.5)

    def test_missing_char_logged(self, fake_font):
        logger = RenderLogger()
        LayoutEngine(fake_font, LayoutConfig(), logger).layout("H?")
        assert logger.stats.missing_chars == ["?"]
        assert logger.stats.glyphs_placed == 1

    def test_all_missing(self, fake_font):
        result = _layout(fake_font, "???")
        assert result.glyphs == ()
        assert result.bbox is None
        assert len(result.missing) == 3


class TestBoundingBox:
    """Tests for the aggregate bounding box."""

    def test_union_of_glyphs(self, fake_font):
        bbox = _layout(fake_font, "HI").bbox
        assert bbox.min_x == pytest.approx(0.0)
        assert bbox.min_y == pytest.approx(0.0)
        assert bbox.max_x == pytest.approx(8.0)
        assert bbox.max_y == pytest.approx(7.0)

    def test_multi_line(self, fake_font):
        bbox = _layout(fake_font, "H\nI", line_spacing_mm=10.0).bbox
        assert bbox.min_y == pytest.approx(-10.0)
        assert bbox.max_y == pytest.approx(7.0)


class TestOrigin:
    """Tests for origin policies."""

    def test_none_keeps_coordinates(self, fake_font):
        result = _layout(fake_font, " I")
        assert result.origin == Point(0.0, 0.0)
        assert result.bbox.min_x == pytest.approx(3.5)

    def test_left_baseline(self, fake_font):
        result = _layout(fake_font, " I", origin=OriginPolicy.LEFT_BASELINE)

        assert result.bbox.min_x == pytest.approx(0.0)
        assert result.bbox.min_y == pytest.approx(0.0)
        assert result.origin.x == pytest.approx(-3.5)
        assert result.glyphs[1].cursor.x == pytest.approx(-1.0)

    def test_center(self, fake_font):
        result = _layout(fake_font, "HI", origin=OriginPolicy.CENTER)
        bbox = result.bbox

        assert bbox.center.x == pytest.approx(0.0)
        assert bbox.center.y == pytest.approx(0.0)
        assert bbox.width == pytest.approx(8.0)
        assert result.glyphs[0].bbox.min_x == pytest.approx(-4.0)

    def test_paths_follow_origin(self, fake_font):
        result = _layout(fake_font, "HI", origin=OriginPolicy.CENTER)
        first = result.glyphs[0].path.commands[0].points[0]
        assert first.x == pytest.approx(-4.0)
        assert first.y == pytest.approx(-3.5)

    def test_origin_offset_without_bbox(self):
        assert origin_offset(None, OriginPolicy.CENTER) == Point(0.0, 0.0)

    def test_origin_offset_values(self):
        bbox = BoundingBox(2.0, -1.0, 6.0, 3.0)
        assert origin_offset(bbox, OriginPolicy.LEFT_BASELINE) == Point(-2.0, 0.0)
        assert origin_offset(bbox, OriginPolicy.CENTER) == Point(-4.0, -1.0)
        assert origin_offset(bbox, OriginPolicy.NONE) == Point(0.0, 0.0)

    def test_apply_origin_none_returns_same(self, fake_font):
        result = _layout(fake_font, "HI")
        assert apply_origin(result, OriginPolicy.NONE) is result


class TestWidthFit:
    """Tests for fitting the layout to a target width."""

    def test_height_solved_from_width(self, fake_font):
        """HI is 0.8 em wide, so 16 mm needs a 20 mm em."""
        result = _layout(fake_font, "HI", width_mm=16.0)
        assert result.height_mm == pytest.approx(20.0)
        assert result.bbox.width == pytest.approx(16.0, abs=1e-6)

    def test_width_with_letter_spacing(self, fake_font):
        result = _layout(fake_font, "HI", width_mm=17.0, letter_spacing_mm=1.0)
        assert result.height_mm == pytest.approx(20.0)
        assert result.bbox.width == pytest.approx(17.0, abs=1e-6)

    def test_width_fit_applies_origin(self, fake_font):
        result = _layout(fake_font, " I", width_mm=2.0, origin=OriginPolicy.LEFT_BASELINE)
        assert result.bbox.min_x == pytest.approx(0.0)
        assert result.bbox.width == pytest.approx(2.0, abs=1e-6)

    def test_nonpositive_width(self, fake_font):
        engine = LayoutEngine(fake_font, LayoutConfig())
        with pytest.raises(ConfigurationError, match="width_mm"):
            engine.layout_to_width("HI", 0.0)

    def test_no_measurable_width(self, fake_font):
        engine = LayoutEngine(fake_font, LayoutConfig())
        with pytest.raises(ConfigurationError, match="no measurable width"):
            engine.layout_to_width("   ", 10.0)

    def test_unreachable_width(self, fake_font):
        engine = LayoutEngine(fake_font, LayoutConfig(letter_spacing_mm=50.0))
        with pytest.raises(ConfigurationError, match="too narrow"):
            engine.layout_to_width("HI", 10.0)

    def test_layout_is_repeatable(self, fake_font):
        engine = LayoutEngine(fake_font, LayoutConfig(width_mm=16.0))
        assert engine.layout("HI") == engine.layout("HI")

    def test_measuring_layouts_not_logged(self, fake_font):
        """Only the final layout reaches the logger; the two measuring passes stay silent."""
        mock_logger = MagicMock()
        logger = RenderLogger(mock_logger)
        LayoutEngine(fake_font, LayoutConfig(width_mm=16.0), logger).layout("HI")

        events = [call.args[0] for call in mock_logger.debug.call_args_list]
        assert events.count("Layout started") == 1
        assert events.count("Glyph placed") == 2
        assert logger.stats.glyphs_placed == 2
