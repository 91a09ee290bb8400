"""Geometric operations shared by the extrusion pipeline.

This module provides the small numeric building blocks used by the
tessellator, the extrusion engine and the plate generator:
- Triangle normals with an explicit zero-vector fallback
- Orientation mapping from extrusion space to output space
- Axis-aligned bounds and in-place centering of planar meshes
- Winding numbers for nonzero fill classification

All functions are pure and stateless except center_mesh_xy, which
translates its mesh in place.
"""

import math

from textrude.domain import Mesh2D, Orientation, Point, Triangle3D, Vec3

ZERO_NORMAL: Vec3 = (0.0, 0.0, 0.0)

Bounds = tuple[float, float, float, float]


def calc_normal(a: Vec3, b: Vec3, c: Vec3) -> Vec3:
    """Calculate the unit normal of a triangle.

    The normal is the normalized cross product (b - a) x (c - a), so it
    follows the right-hand rule over the vertex order.

    Args:
        a: First vertex
        b: Second vertex
        c: Third vertex

    Returns:
        Unit normal, or (0, 0, 0) when the triangle has no area

    Examples:
        >>> calc_normal((0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
        (0.0, 0.0, 1.0)
        >>> calc_normal((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), (2.0, 2.0, 2.0))
        (0.0, 0.0, 0.0)
    """
    ux, uy, uz = b[0] - a[0], b[1] - a[1], b[2] - a[2]
    vx, vy, vz = c[0] - a[0], c[1] - a[1], c[2] - a[2]

    nx = uy * vz - uz * vy
    ny = uz * vx - ux * vz
    nz = ux * vy - uy * vx

    length = math.sqrt(nx * nx + ny * ny + nz * nz)
    if length == 0.0 or not math.isfinite(length):
        return ZERO_NORMAL

    return (nx / length, ny / length, nz / length)


def triangle_with_normal(a: Vec3, b: Vec3, c: Vec3) -> Triangle3D:
    """Build a facet from three corners, computing its normal."""
    return Triangle3D(normal=calc_normal(a, b, c), vertices=(a, b, c))


def map_point(p: Point, z: float, orientation: Orientation) -> Vec3:
    """Place a 2D point at extrusion height z in output space.

    FLAT keeps (x, y, z). FRONT maps to (x, -z, y): the extrusion axis
    faces the viewer and the text keeps its vertical sense.

    Args:
        p: Point in layout space
        z: Height along the extrusion axis
        orientation: Output orientation

    Returns:
        3D coordinate
    """
    if orientation == Orientation.FRONT:
        return (p.x, -z, p.y)
    return (p.x, p.y, z)


def signed_area(a: Point, b: Point, c: Point) -> float:
    """Signed area of a 2D triangle, positive when counter-clockwise."""
    return ((b.x - a.x) * (c.y - a.y) - (c.x - a.x) * (b.y - a.y)) / 2.0


def mesh_bounds(mesh: Mesh2D) -> Bounds | None:
    """Axis-aligned bounds of a planar mesh.

    Args:
        mesh: Mesh to measure

    Returns:
        (min_x, max_x, min_y, max_y), or None for a mesh without vertices
    """
    if mesh.is_empty():
        return None

    xs = [p.x for p in mesh.vertices]
    ys = [p.y for p in mesh.vertices]
    return (min(xs), max(xs), min(ys), max(ys))


def center_mesh_xy(mesh: Mesh2D) -> tuple[float, float]:
    """Translate a mesh in place so its bounding box is centered on the origin.

    Args:
        mesh: Mesh to move

    Returns:
        The (dx, dy) translation that was applied; (0, 0) for an empty mesh
    """
    bounds = mesh_bounds(mesh)
    if bounds is None:
        return (0.0, 0.0)

    min_x, max_x, min_y, max_y = bounds
    dx = -(min_x + max_x) * 0.5
    dy = -(min_y + max_y) * 0.5

    mesh.vertices = [p.translated(dx, dy) for p in mesh.vertices]
    return (dx, dy)


def winding_number(point: Point, ring: list[Point]) -> int:
    """Winding number of a closed ring around a point.

    Counter-clockwise rings contribute +1, clockwise rings -1. The closing
    edge from the last point back to the first is implicit.

    Args:
        point: The point to test
        ring: Ring vertices without a repeated closing point

    Returns:
        Signed number of turns the ring makes around the point
    """
    n = len(ring)
    if n < 3:
        return 0

    wn = 0
    x, y = point.x, point.y
    for i in range(n):
        a = ring[i]
        b = ring[(i + 1) % n]
        # Side of the point relative to edge a->b
        side = (b.x - a.x) * (y - a.y) - (x - a.x) * (b.y - a.y)
        if a.y <= y:
            if b.y > y and side > 0:
                wn += 1
        elif b.y <= y and side < 0:
            wn -= 1

    return wn
