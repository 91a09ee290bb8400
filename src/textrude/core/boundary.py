"""Boundary edge detection for planar triangle meshes.

An edge used by exactly one triangle lies on the silhouette of the filled
shape (outer contours and holes alike). Edges are matched through an
undirected key (min, max) while the direction in which each edge was first
seen is kept, so side walls can be emitted facing outwards.
"""

from collections.abc import Sequence
from dataclasses import dataclass

Edge = tuple[int, int]


@dataclass(frozen=True)
class EdgeCensus:
    """Classification of the edges of a triangle list.

    Attributes:
        boundary: Edges used by exactly one triangle, in the orientation of
            that triangle
        interior_count: Number of edges shared by exactly two triangles
        non_manifold_count: Number of edges used by three or more triangles
    """

    boundary: list[Edge]
    interior_count: int
    non_manifold_count: int


def edge_census(indices: Sequence[int]) -> EdgeCensus:
    """Count edge usage over a triangle index list.

    Args:
        indices: Vertex indices, three per triangle

    Returns:
        EdgeCensus with boundary edges in first-seen orientation
    """
    counts: dict[Edge, int] = {}
    oriented: dict[Edge, Edge] = {}

    for t in range(0, len(indices) - 2, 3):
        i0, i1, i2 = indices[t], indices[t + 1], indices[t + 2]
        for a, b in ((i0, i1), (i1, i2), (i2, i0)):
            key = (a, b) if a < b else (b, a)
            counts[key] = counts.get(key, 0) + 1
            oriented.setdefault(key, (a, b))

    boundary = [oriented[key] for key, count in counts.items() if count == 1]
    interior = sum(1 for count in counts.values() if count == 2)
    non_manifold = sum(1 for count in counts.values() if count > 2)

    return EdgeCensus(
        boundary=boundary,
        interior_count=interior,
        non_manifold_count=non_manifold,
    )


def boundary_edges(indices: Sequence[int]) -> list[Edge]:
    """Return the silhouette edges of a triangle index list.

    Args:
        indices: Vertex indices, three per triangle

    Returns:
        Edges used by exactly one triangle, each as (i0, i1) in the
        winding direction of its triangle

    Examples:
        >>> sorted(boundary_edges([0, 1, 2, 2, 1, 3]))
        [(0, 1), (1, 3), (2, 0), (3, 2)]
    """
    return edge_census(indices).boundary
