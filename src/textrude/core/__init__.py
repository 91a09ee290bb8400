"""Core processing algorithms for textrude.

This module contains the core algorithms for:

- Text layout (pen cursor, kerning, line breaks)
- Outline path construction (fontTools pen protocol)
- Tessellation (nonzero fill, triangulation)
- Boundary detection and extrusion into closed solids
- Backing plates, bounds and centering

All algorithms are single-threaded and deterministic; apart from the
explicit centering translation no stage mutates its input.

Key functions:
- convert_escapes: Turn a literal backslash-n into a line break
- boundary_edges: Silhouette edges of a triangle list
- extrude_mesh: Extrude a planar mesh into a closed solid
- build_plate: Backing plate behind the text
- mesh_bounds / center_mesh_xy: Bounds and centering
- calc_normal / map_point: Normals and orientation mapping

Key classes:
- PathBuilder: Curve sink assembling the outline path
- TextLayout: Lays out text into a path
- Tessellator: Fills a path with triangles
- TextSolidBuilder: Runs the whole conversion
"""

from textrude.core.boundary import EdgeCensus, boundary_edges, edge_census
from textrude.core.extrusion import extrude_mesh, extrude_mesh_with_offset
from textrude.core.geometry import (
    calc_normal,
    center_mesh_xy,
    map_point,
    mesh_bounds,
    triangle_with_normal,
    winding_number,
)
from textrude.core.layout import TextLayout, convert_escapes
from textrude.core.path_builder import PathBuilder
from textrude.core.pipeline import ConversionResult, TextSolidBuilder
from textrude.core.plate import build_plate, plate_offset, rectangle_mesh
from textrude.core.tessellator import Tessellator, flatten_subpath

__all__ = [
    # Pipeline classes
    "ConversionResult",
    "TextSolidBuilder",
    # Boundary detection
    "EdgeCensus",
    "boundary_edges",
    "edge_census",
    # Layout
    "PathBuilder",
    "TextLayout",
    "convert_escapes",
    # Tessellation
    "Tessellator",
    "flatten_subpath",
    # Extrusion and plate
    "build_plate",
    "extrude_mesh",
    "extrude_mesh_with_offset",
    "plate_offset",
    "rectangle_mesh",
    # Geometry functions
    "calc_normal",
    "center_mesh_xy",
    "map_point",
    "mesh_bounds",
    "triangle_with_normal",
    "winding_number",
]
