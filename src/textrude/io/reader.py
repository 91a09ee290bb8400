"""Font reader exposing the metrics and outlines needed for layout.

This module provides the FontFace class, a read-only view over a fontTools
TTFont that answers the questions the layout engine asks: metrics, glyph
lookup by character, advances, outlines and simple pair kerning.
"""

from pathlib import Path
from typing import Any

from fontTools.ttLib import TTCollection, TTFont, TTLibError

from textrude.exceptions import FontFaceIndexError, FontLoadError

# Searched in order when no font path is given
DEFAULT_FONT_CANDIDATES: tuple[Path, ...] = (
    Path("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/dejavu/DejaVuSans.ttf"),
    Path("/usr/share/fonts/TTF/DejaVuSans.ttf"),
    Path("/usr/share/fonts/opentype/noto/NotoSansCJK-Regular.ttc"),
    Path("/usr/share/fonts/noto/NotoSans-Regular.ttf"),
    Path("/usr/share/fonts/truetype/liberation/LiberationSans-Regular.ttf"),
    Path("/Library/Fonts/Arial.ttf"),
    Path("/System/Library/Fonts/Supplemental/Arial.ttf"),
    Path("/System/Library/Fonts/Helvetica.ttc"),
    Path("C:/Windows/Fonts/arial.ttf"),
)

# 'kern' coverage bits, OpenType (version 0) layout
_OT_HORIZONTAL = 0x01
_OT_CROSS_STREAM = 0x04

# 'kern' coverage bits, Apple (version 1) layout, high byte only
_AAT_VERTICAL = 0x80
_AAT_CROSS_STREAM = 0x40

_COLLECTION_TAG = b"ttcf"


def find_default_font() -> Path:
    """Locate a fallback font on the local system.

    Returns:
        Path of the first existing candidate font

    Raises:
        FontLoadError: If none of the candidates exists
    """
    for candidate in DEFAULT_FONT_CANDIDATES:
        if candidate.is_file():
            return candidate
    raise FontLoadError(
        "<default>",
        "no default font found on this system; pass one with --font",
    )


def count_faces(font_path: Path) -> int:
    """Count the faces in a font file.

    Args:
        font_path: Path to a TTF/OTF/TTC file

    Returns:
        Number of faces (1 for single-face files)
    """
    with open(font_path, "rb") as fh:
        tag = fh.read(4)
    if tag != _COLLECTION_TAG:
        return 1
    collection = TTCollection(str(font_path), lazy=True)
    try:
        return len(collection.fonts)
    finally:
        collection.close()


def _is_simple_horizontal(subtable: Any) -> bool:
    """Check if a kern subtable is a plain horizontal pair table."""
    if not hasattr(subtable, "kernTable"):
        # Only format 0 subtables are decoded into pairs; others are
        # class or state machine based.
        return False

    coverage = getattr(subtable, "coverage", 0)
    if getattr(subtable, "apple", False):
        horizontal = not coverage & _AAT_VERTICAL
        cross_stream = bool(coverage & _AAT_CROSS_STREAM)
    else:
        horizontal = bool(coverage & _OT_HORIZONTAL)
        cross_stream = bool(coverage & _OT_CROSS_STREAM)

    return horizontal and not cross_stream


class FontFace:
    """Read-only font face used by the layout engine.

    Glyphs are identified by their glyph names. The face is loaded once per
    run and handed explicitly to the layout engine.

    Example:
        face = FontFace.from_path(Path("font.ttf"))
        name = face.glyph_for_char("A")
        face.draw_glyph(name, pen)
    """

    def __init__(self, font: TTFont, source: str = "<memory>") -> None:
        """Initialize from an already loaded font.

        Args:
            font: The fonttools TTFont object
            source: Human-readable origin for diagnostics
        """
        self._font = font
        self._source = source
        self._cmap: dict[int, str] = font.getBestCmap() or {}
        self._glyph_set = font.getGlyphSet()
        self._kern_subtables = self._collect_kern_subtables()

    @classmethod
    def from_path(cls, font_path: Path, face_index: int = 0) -> "FontFace":
        """Load a face from a font file.

        Args:
            font_path: Path to the TTF/OTF/TTC file
            face_index: 0-based face index for collections

        Returns:
            Loaded FontFace

        Raises:
            FontLoadError: If the file is missing or cannot be parsed
            FontFaceIndexError: If face_index is out of range
        """
        if not font_path.exists():
            raise FontLoadError(str(font_path), "file not found")

        try:
            face_count = count_faces(font_path)
        except (OSError, TTLibError) as e:
            raise FontLoadError(str(font_path), str(e)) from e

        if face_count == 0:
            raise FontLoadError(str(font_path), "font file appears to have no faces")
        if face_index >= face_count:
            raise FontFaceIndexError(str(font_path), face_index, face_count)

        try:
            if face_count > 1:
                font = TTFont(str(font_path), fontNumber=face_index)
            else:
                font = TTFont(str(font_path))
            return cls(font, source=str(font_path))
        except Exception as e:
            raise FontLoadError(str(font_path), f"face {face_index}: {e}") from e

    @classmethod
    def load_default(cls) -> "FontFace":
        """Load the first font found among the default system locations."""
        return cls.from_path(find_default_font())

    @property
    def source(self) -> str:
        """Where the font came from."""
        return self._source

    @property
    def glyph_set(self) -> Any:
        """The fontTools glyph set, used to decompose composite glyphs."""
        return self._glyph_set

    @property
    def units_per_em(self) -> int:
        """Return font's units per em."""
        return self._font["head"].unitsPerEm  # type: ignore[attr-defined]

    @property
    def ascender(self) -> int:
        """Return the horizontal header ascent in font units."""
        return self._font["hhea"].ascent  # type: ignore[attr-defined]

    @property
    def descender(self) -> int:
        """Return the horizontal header descent in font units (negative)."""
        return self._font["hhea"].descent  # type: ignore[attr-defined]

    @property
    def line_height(self) -> int:
        """Return the baseline-to-baseline distance in font units.

        Computed as ascent - descent + lineGap from the hhea table.
        """
        hhea = self._font["hhea"]
        return hhea.ascent - hhea.descent + hhea.lineGap  # type: ignore[attr-defined]

    @property
    def has_kerning(self) -> bool:
        """Whether the font has usable simple pair kerning."""
        return bool(self._kern_subtables)

    def glyph_for_char(self, char: str) -> str | None:
        """Resolve a character to a glyph name.

        Args:
            char: A single character

        Returns:
            Glyph name, or None if the font has no glyph for it
        """
        return self._cmap.get(ord(char))

    def advance_width(self, glyph_name: str) -> int:
        """Return the horizontal advance of a glyph in font units.

        Glyphs without metrics advance by 0.
        """
        hmtx = self._font.get("hmtx")
        if hmtx is None or glyph_name not in hmtx.metrics:
            return 0
        advance, _lsb = hmtx.metrics[glyph_name]
        return advance

    def draw_glyph(self, glyph_name: str, pen: Any) -> None:
        """Draw a glyph outline into a fontTools pen.

        Args:
            glyph_name: Name of the glyph to draw
            pen: Any object implementing the fontTools pen protocol

        Raises:
            KeyError: If the glyph is not in the font
            Exception: Whatever the outline decoder raises for corrupt data
        """
        self._glyph_set[glyph_name].draw(pen)

    def kerning(self, left: str, right: str) -> int | None:
        """Look up the horizontal kerning adjustment for a glyph pair.

        Only horizontal, non cross-stream pair subtables are consulted; the
        first subtable with an entry for the pair wins.

        Args:
            left: Previous glyph name
            right: Current glyph name

        Returns:
            Adjustment in font units, or None if no subtable has the pair
        """
        for subtable in self._kern_subtables:
            value = subtable.kernTable.get((left, right))
            if value is not None:
                return value
        return None

    def close(self) -> None:
        """Close the font file and free resources."""
        self._font.close()

    def _collect_kern_subtables(self) -> list[Any]:
        if "kern" not in self._font:
            return []
        kern = self._font["kern"]
        return [t for t in getattr(kern, "kernTables", []) if _is_simple_horizontal(t)]

    def __enter__(self) -> "FontFace":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
