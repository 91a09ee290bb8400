"""Mesh types for the extrusion pipeline.

- Mesh2D: A planar triangle mesh (vertices + 16-bit triangle indices)
- Triangle3D: A 3D facet with its unit normal
- Orientation: How the extruded solid is laid out in 3D space
"""

from dataclasses import dataclass, field
from enum import Enum

from textrude.domain.contour import Point

# Indices are stored as unsigned 16-bit values
MAX_VERTEX_COUNT = 1 << 16

Vec3 = tuple[float, float, float]


class Orientation(str, Enum):
    """Placement of the extruded text in 3D space.

    FLAT lays the text on the X/Y plane and extrudes along Z. FRONT keeps
    X, turns the extrusion axis into -Y (towards the viewer) and maps the
    text's vertical axis onto Z.
    """

    FLAT = "flat"
    FRONT = "front"


@dataclass
class Mesh2D:
    """A triangulated planar mesh.

    Triangles are consecutive index triples and wind counter-clockwise
    over filled area.

    Attributes:
        vertices: Vertex positions in layout units
        indices: Vertex indices, three per triangle
    """

    vertices: list[Point] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.indices) % 3 != 0:
            raise ValueError(
                f"Index count must be a multiple of 3, got {len(self.indices)}"
            )
        vertex_count = len(self.vertices)
        for index in self.indices:
            if not 0 <= index < vertex_count:
                raise ValueError(
                    f"Index {index} out of range for {vertex_count} vertices"
                )

    @property
    def triangle_count(self) -> int:
        """Number of triangles in the mesh."""
        return len(self.indices) // 3

    def is_empty(self) -> bool:
        """Check if the mesh has no vertices.

        Returns:
            True if there are no vertices
        """
        return len(self.vertices) == 0

    def triangles(self) -> list[tuple[int, int, int]]:
        """Index triples, one per triangle."""
        idx = self.indices
        return [(idx[i], idx[i + 1], idx[i + 2]) for i in range(0, len(idx), 3)]


@dataclass(frozen=True, slots=True)
class Triangle3D:
    """A 3D facet.

    Attributes:
        normal: Unit normal, or (0, 0, 0) for a degenerate triangle
        vertices: The three corners in winding order
    """

    normal: Vec3
    vertices: tuple[Vec3, Vec3, Vec3]
