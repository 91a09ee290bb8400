"""Domain models for textrude.

This module contains the core data types flowing through the text to solid
pipeline. All models are designed to be:

- Immutable where possible (using frozen dataclasses)
- Independent of fontTools, shapely and numpy-stl implementation details

Key classes:
- Point: A 2D point in layout units
- Contour: A flattened closed ring
- Path: Combined glyph outline made of subpaths and drawing commands
- Mesh2D: Triangulated planar fill of the outline
- Triangle3D: A facet of the extruded solid
- Orientation: Flat or front-facing placement
"""

from textrude.domain.contour import Contour, Point, WindingDirection
from textrude.domain.mesh import MAX_VERTEX_COUNT, Mesh2D, Orientation, Triangle3D, Vec3
from textrude.domain.path import CommandType, Path, PathCommand, Subpath

__all__: list[str] = [
    # Enums
    "CommandType",
    "Orientation",
    "WindingDirection",
    # Core types
    "MAX_VERTEX_COUNT",
    "Contour",
    "Mesh2D",
    "Path",
    "PathCommand",
    "Point",
    "Subpath",
    "Triangle3D",
    "Vec3",
]
