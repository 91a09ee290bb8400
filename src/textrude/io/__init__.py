"""I/O layer for textrude.

This module handles reading fonts with fontTools and writing meshes with
numpy-stl. It provides a clean abstraction layer between those libraries
and the domain models.

Key responsibilities:
- Load TTF/OTF/TTC fonts and select a face
- Expose metrics, glyph lookup, outlines and pair kerning
- Write triangle lists as ASCII STL to a file or stdout

Key classes:
- FontFace: Read-only font face for layout
- StlWriter: ASCII STL output
"""

from textrude.io.reader import FontFace, find_default_font
from textrude.io.writer import StlWriter

__all__ = [
    "FontFace",
    "StlWriter",
    "find_default_font",
]
