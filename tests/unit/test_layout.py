"""Tests for the text layout engine."""

from unittest.mock import MagicMock

import pytest

from textrude.config import TextConfig
from textrude.core.layout import TextLayout, convert_escapes
from textrude.domain import CommandType
from textrude.exceptions import GlyphOutlineError
from textrude.io import FontFace
from textrude.utils import ConversionLogger

from conftest import build_test_font


def _origin(subpath) -> tuple[float, float]:
    """Lower-left corner of a subpath's points."""
    points = [p for command in subpath.commands for p in command.points]
    return (min(p.x for p in points), min(p.y for p in points))


@pytest.fixture
def logger() -> ConversionLogger:
    return ConversionLogger(MagicMock())


def _layout(face, logger, **config) -> TextLayout:
    # Unit scale: size equals units per em
    config.setdefault("size", 1000.0)
    return TextLayout.from_config(face, TextConfig(**config), logger=logger)


class TestConvertEscapes:
    """Tests for convert_escapes."""

    def test_backslash_n(self):
        """Literal backslash-n becomes a line break."""
        assert convert_escapes("line1\\nline2") == "line1\nline2"

    def test_other_escapes_untouched(self):
        """Only backslash-n is recognized."""
        assert convert_escapes("a\\tb\\\\c") == "a\\tb\\\\c"

    def test_real_newline_untouched(self):
        """Existing line breaks stay as they are."""
        assert convert_escapes("a\nb") == "a\nb"


class TestMetrics:
    """Scale and baseline derived from font metrics."""

    def test_scale_and_baseline(self, test_face, logger):
        """Scale is size / upm and the baseline is the scaled ascender."""
        layout = _layout(test_face, logger, size=72.0)
        assert layout.scale == pytest.approx(0.072)
        assert layout.baseline_y == pytest.approx(800 * 0.072)
        assert layout.line_advance == pytest.approx(1000 * 0.072)

    def test_scaled_glyph(self, test_face, logger):
        """Outline coordinates are scaled and placed on the baseline."""
        path = _layout(test_face, logger, size=72.0).layout("H")
        points = list(path.iter_points())
        assert min(p.x for p in points) == pytest.approx(0.0)
        assert max(p.x for p in points) == pytest.approx(600 * 0.072)
        assert min(p.y for p in points) == pytest.approx(800 * 0.072)
        assert max(p.y for p in points) == pytest.approx(1500 * 0.072)


class TestPenAdvance:
    """Horizontal pen movement."""

    def test_single_glyph(self, test_face, logger):
        """First glyph sits at x = 0 on the first baseline."""
        path = _layout(test_face, logger).layout("H")
        assert len(path) == 1
        assert _origin(path.subpaths[0]) == pytest.approx((0.0, 800.0))

    def test_advance(self, test_face, logger):
        """Pen moves by the glyph advance."""
        path = _layout(test_face, logger).layout("HH")
        assert _origin(path.subpaths[1]) == pytest.approx((700.0, 800.0))

    def test_spacing(self, test_face, logger):
        """Spacing is added after every glyph."""
        path = _layout(test_face, logger, spacing=10.0).layout("HHH")
        assert _origin(path.subpaths[1])[0] == pytest.approx(710.0)
        assert _origin(path.subpaths[2])[0] == pytest.approx(1420.0)

    def test_space_advances_without_outline(self, test_face, logger):
        """An empty glyph moves the pen but adds no subpaths."""
        path = _layout(test_face, logger).layout("H H")
        assert len(path) == 2
        assert _origin(path.subpaths[1])[0] == pytest.approx(950.0)
        assert logger.stats.glyphs_placed == 3

    def test_hole_glyph_has_two_subpaths(self, test_face, logger):
        """Every contour of a glyph becomes its own subpath."""
        assert len(_layout(test_face, logger).layout("O")) == 2

    def test_curves_are_kept(self, test_face, logger):
        """Quadratic outline segments reach the path unflattened."""
        path = _layout(test_face, logger).layout("C")
        kinds = {command.kind for command in path.subpaths[0].commands}
        assert CommandType.QUADRATIC in kinds

    def test_empty_text(self, test_face, logger):
        """No text, no path."""
        assert _layout(test_face, logger).layout("").is_empty()


class TestKerning:
    """Pair kerning."""

    def test_kerning_applied(self, test_face, logger):
        """A-V pair pulls V closer."""
        path = _layout(test_face, logger).layout("AV")
        assert _origin(path.subpaths[1])[0] == pytest.approx(550.0)

    def test_kerning_disabled(self, test_face, logger):
        """Disabled kerning uses plain advances."""
        path = _layout(test_face, logger, kerning=False).layout("AV")
        assert _origin(path.subpaths[1])[0] == pytest.approx(650.0)

    def test_font_without_kern_table(self, logger):
        """Fonts without kerning lay out with plain advances."""
        face = FontFace(build_test_font(with_kerning=False))
        path = _layout(face, logger).layout("AV")
        assert _origin(path.subpaths[1])[0] == pytest.approx(650.0)

    def test_unlisted_pair(self, test_face, logger):
        """Pairs missing from the table are not adjusted."""
        path = _layout(test_face, logger).layout("VA")
        assert _origin(path.subpaths[1])[0] == pytest.approx(650.0)

    def test_no_kerning_across_newline(self, test_face, logger):
        """A line break resets the previous glyph."""
        path = _layout(test_face, logger).layout("A\nV")
        assert _origin(path.subpaths[1]) == pytest.approx((0.0, -200.0))

    def test_kerning_spans_missing_glyph(self, test_face, logger):
        """A skipped character does not break the kerning pair."""
        path = _layout(test_face, logger).layout("AxV")
        assert _origin(path.subpaths[1])[0] == pytest.approx(550.0)


class TestLineBreaks:
    """Multi-line layout."""

    def test_newline(self, test_face, logger):
        """Second line starts at x = 0, one line height lower."""
        path = _layout(test_face, logger).layout("HH\nH")
        assert _origin(path.subpaths[2]) == pytest.approx((0.0, -200.0))
        assert logger.stats.line_breaks == 1

    def test_consecutive_newlines(self, test_face, logger):
        """Empty lines still move the baseline."""
        path = _layout(test_face, logger).layout("H\n\nH")
        assert _origin(path.subpaths[1]) == pytest.approx((0.0, -1200.0))

    def test_escape_not_converted_by_layout(self, test_face, logger):
        """Layout itself treats backslash-n as two ordinary characters."""
        path = _layout(test_face, logger).layout("H\\nH")
        assert len(path) == 2
        assert _origin(path.subpaths[1]) == pytest.approx((700.0, 800.0))


class TestMissingGlyphs:
    """Characters the font cannot render."""

    def test_missing_glyph_is_skipped(self, test_face, logger):
        """Output equals the layout of the filtered string."""
        with_missing = _layout(test_face, logger).layout("HxH")
        filtered = _layout(test_face, ConversionLogger(MagicMock())).layout("HH")
        assert with_missing == filtered

    def test_missing_glyph_is_logged(self, test_face):
        """Each skipped character produces a warning and a stat."""
        structured = MagicMock()
        logger = ConversionLogger(structured)
        _layout(test_face, logger).layout("xHy")

        assert logger.stats.skipped_chars == ["x", "y"]
        assert logger.stats.glyphs_skipped == 2
        assert structured.warning.call_count == 2


class TestOutlineFailure:
    """Glyphs that fail to draw."""

    def test_draw_failure_raises(self, logger):
        """A decoder error surfaces as GlyphOutlineError."""
        face = MagicMock()
        face.glyph_set = None
        face.glyph_for_char.return_value = "broken"
        face.kerning.return_value = None
        face.advance_width.return_value = 500
        face.draw_glyph.side_effect = ValueError("corrupt contour")

        layout = TextLayout(face, scale=1.0, baseline_y=0.0, logger=logger)
        with pytest.raises(GlyphOutlineError) as exc_info:
            layout.layout("Z")

        assert exc_info.value.char == "Z"
        assert exc_info.value.glyph_name == "broken"
        assert "corrupt contour" in str(exc_info.value)
