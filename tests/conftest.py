"""Shared fixtures: a small synthetic TrueType font built in memory."""

from pathlib import Path

import pytest
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTFont, newTable
from fontTools.ttLib.tables._k_e_r_n import KernTable_format_0

from textrude.io import FontFace

UPM = 1000
ASCENT = 800
DESCENT = -200

# Glyph name -> (character, advance width)
GLYPHS: dict[str, tuple[str | None, int]] = {
    ".notdef": (None, 500),
    "space": (" ", 250),
    "A": ("A", 650),
    "V": ("V", 650),
    "H": ("H", 700),
    "O": ("O", 700),
    "C": ("C", 700),
}

KERN_PAIRS = {("A", "V"): -100}


def _draw_glyph(name: str):
    pen = TTGlyphPen(None)
    if name == "A":
        # Triangle, clockwise
        pen.moveTo((0, 0))
        pen.lineTo((300, 700))
        pen.lineTo((600, 0))
        pen.closePath()
    elif name == "V":
        pen.moveTo((0, 700))
        pen.lineTo((600, 700))
        pen.lineTo((300, 0))
        pen.closePath()
    elif name == "H":
        # Plain box, clockwise
        pen.moveTo((0, 0))
        pen.lineTo((0, 700))
        pen.lineTo((600, 700))
        pen.lineTo((600, 0))
        pen.closePath()
    elif name == "O":
        # Box with a square hole: clockwise outer, counter-clockwise inner
        pen.moveTo((0, 0))
        pen.lineTo((0, 700))
        pen.lineTo((600, 700))
        pen.lineTo((600, 0))
        pen.closePath()
        pen.moveTo((150, 150))
        pen.lineTo((450, 150))
        pen.lineTo((450, 550))
        pen.lineTo((150, 550))
        pen.closePath()
    elif name == "C":
        # Box with a quadratic arch on top
        pen.moveTo((0, 0))
        pen.lineTo((0, 700))
        pen.qCurveTo((300, 900), (600, 700))
        pen.lineTo((600, 0))
        pen.closePath()
    return pen.glyph()


def build_test_font(with_kerning: bool = True) -> TTFont:
    """Build the synthetic test font.

    Args:
        with_kerning: Add a format 0 kern table with KERN_PAIRS

    Returns:
        In-memory TTFont
    """
    glyph_order = list(GLYPHS)
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(glyph_order)
    fb.setupCharacterMap({ord(char): name for name, (char, _) in GLYPHS.items() if char})
    fb.setupGlyf({name: _draw_glyph(name) for name in glyph_order})
    fb.setupHorizontalMetrics({name: (advance, 0) for name, (_, advance) in GLYPHS.items()})
    fb.setupHorizontalHeader(ascent=ASCENT, descent=DESCENT)
    fb.setupNameTable({"familyName": "Textrude Test", "styleName": "Regular"})
    fb.setupOS2(sTypoAscender=ASCENT, usWinAscent=ASCENT, usWinDescent=-DESCENT)
    fb.setupPost()

    if with_kerning:
        kern = newTable("kern")
        kern.version = 0
        subtable = KernTable_format_0()
        subtable.coverage = 1
        subtable.kernTable = dict(KERN_PAIRS)
        kern.kernTables = [subtable]
        fb.font["kern"] = kern

    return fb.font


@pytest.fixture
def test_ttfont() -> TTFont:
    """Synthetic font with kerning."""
    return build_test_font()


@pytest.fixture
def test_face(test_ttfont: TTFont) -> FontFace:
    """FontFace over the synthetic font."""
    return FontFace(test_ttfont, source="test-font")


@pytest.fixture
def test_font_path(tmp_path: Path) -> Path:
    """Synthetic font saved to a temporary .ttf file."""
    path = tmp_path / "TextrudeTest-Regular.ttf"
    build_test_font().save(str(path))
    return path
