"""Textrude - Extrude text into 3D-printable solids.

Textrude lays out a string with a TrueType/OpenType font, fills the glyph
outlines with triangles and extrudes them into a closed solid, optionally
standing on a rectangular backing plate. The result is written as ASCII STL.

Example:
    $ textrude "Hello" --font Roboto-Regular.ttf --depth 4 -o hello.stl

This will create hello.stl with the word extruded 4 units deep.
"""

__version__ = "0.1.0"
__author__ = "Textrude contributors"

__all__ = ["__author__", "__version__"]
