"""Planar tessellation of outline paths.

Turns a combined outline Path into a Mesh2D in three steps:

1. Flatten every subpath into a closed polyline ring (Bezier segments are
   subdivided until they are within the tolerance).
2. Resolve the filled region with the nonzero winding rule: the noded
   ring linework is polygonized with shapely and every face whose winding
   number is nonzero is kept.
3. Triangulate each filled polygon (with its holes) using mapbox-earcut
   and normalize every triangle to counter-clockwise winding.
"""

import mapbox_earcut as earcut
import numpy as np
import shapely
from shapely.errors import GEOSException
from shapely.geometry import LineString, MultiPolygon, Polygon
from shapely.geometry.polygon import orient
from shapely.ops import unary_union

from textrude.core._bezier import flatten_cubic, flatten_quadratic
from textrude.core.geometry import signed_area, winding_number
from textrude.domain import MAX_VERTEX_COUNT, CommandType, Contour, Mesh2D, Path, Point, Subpath
from textrude.exceptions import GeometryTooComplexError, TessellationError
from textrude.utils.logging import ConversionLogger


def flatten_subpath(subpath: Subpath, tolerance: float) -> Contour:
    """Flatten one subpath into a closed ring.

    Consecutive duplicate points and a trailing copy of the start point are
    removed.

    Args:
        subpath: Subpath to flatten
        tolerance: Maximum distance between curve and polyline

    Returns:
        Contour with the ring points
    """
    points: list[Point] = []
    for command in subpath.commands:
        if command.kind == CommandType.BEGIN:
            points.append(command.points[0])
        elif command.kind == CommandType.LINE:
            points.append(command.points[0])
        elif command.kind == CommandType.QUADRATIC:
            ctrl, end = command.points
            points.extend(flatten_quadratic([points[-1], ctrl, end], tolerance)[1:])
        elif command.kind == CommandType.CUBIC:
            ctrl1, ctrl2, end = command.points
            points.extend(flatten_cubic([points[-1], ctrl1, ctrl2, end], tolerance)[1:])

    ring: list[Point] = []
    for point in points:
        if not ring or ring[-1] != point:
            ring.append(point)
    while len(ring) > 1 and ring[-1] == ring[0]:
        ring.pop()

    return Contour(points=ring)


def _winding_at(point: Point, rings: list[Contour], boxes: list[tuple[float, float, float, float]]) -> int:
    total = 0
    for ring, (min_x, min_y, max_x, max_y) in zip(rings, boxes):
        if min_x <= point.x <= max_x and min_y <= point.y <= max_y:
            total += winding_number(point, ring.points)
    return total


def _as_polygons(geom) -> list[Polygon]:
    if geom.is_empty:
        return []
    if isinstance(geom, Polygon):
        return [geom]
    if isinstance(geom, MultiPolygon):
        return list(geom.geoms)
    return [g for g in getattr(geom, "geoms", []) if isinstance(g, Polygon)]


class Tessellator:
    """Fills outline paths with triangles using the nonzero rule.

    Example:
        tessellator = Tessellator(tolerance=0.01)
        mesh = tessellator.tessellate(path)
    """

    def __init__(self, tolerance: float, logger: ConversionLogger | None = None) -> None:
        """Initialize the tessellator.

        Args:
            tolerance: Curve flattening tolerance in layout units
            logger: Conversion logger for diagnostics
        """
        if tolerance <= 0:
            raise ValueError(f"Tolerance must be positive, got {tolerance}")
        self.tolerance = tolerance
        self.logger = logger if logger is not None else ConversionLogger()

    def tessellate(self, path: Path) -> Mesh2D:
        """Triangulate the filled area of a path.

        Args:
            path: Finalized outline path

        Returns:
            Mesh with counter-clockwise triangles; empty for an empty path

        Raises:
            TessellationError: If the outline cannot be resolved or triangulated
            GeometryTooComplexError: If the mesh exceeds 16-bit indexing
        """
        rings = self.flatten(path)
        polygons = self.fill_region(rings)
        mesh = self.triangulate(polygons)
        self.logger.log_tessellation(len(mesh.vertices), mesh.triangle_count, self.tolerance)
        return mesh

    def flatten(self, path: Path) -> list[Contour]:
        """Flatten every subpath, dropping rings without area."""
        rings = [flatten_subpath(subpath, self.tolerance) for subpath in path.subpaths]
        return [ring for ring in rings if not ring.is_degenerate()]

    def fill_region(self, rings: list[Contour]) -> list[Polygon]:
        """Resolve the nonzero-filled region of a set of rings.

        Args:
            rings: Closed rings with their drawing direction preserved

        Returns:
            Filled polygons, exteriors counter-clockwise and holes clockwise

        Raises:
            TessellationError: If shapely fails on the linework
        """
        if not rings:
            return []

        boxes = [ring.bounding_box() for ring in rings]
        try:
            linework = unary_union(
                [LineString(ring.coords() + [ring.coords()[0]]) for ring in rings]
            )
            faces = shapely.polygonize(shapely.get_parts(linework))
            filled = []
            for face in faces.geoms:
                if face.is_empty or face.area == 0.0:
                    continue
                probe = face.representative_point()
                if _winding_at(Point(probe.x, probe.y), rings, boxes) != 0:
                    filled.append(face)
            region = unary_union(filled) if filled else None
        except (GEOSException, ValueError) as e:
            raise TessellationError(str(e)) from e

        if region is None:
            return []
        return [orient(poly, sign=1.0) for poly in _as_polygons(region) if poly.area > 0.0]

    def triangulate(self, polygons: list[Polygon]) -> Mesh2D:
        """Triangulate polygons with holes into one mesh.

        Args:
            polygons: Oriented polygons from fill_region

        Returns:
            Combined mesh, every triangle counter-clockwise

        Raises:
            TessellationError: If earcut rejects a polygon
            GeometryTooComplexError: If the mesh exceeds 16-bit indexing
        """
        vertices: list[Point] = []
        indices: list[int] = []

        for polygon in polygons:
            rings = [list(polygon.exterior.coords)[:-1]]
            rings.extend(list(interior.coords)[:-1] for interior in polygon.interiors)

            coords = [pt for ring in rings for pt in ring]
            offset = len(vertices)
            if offset + len(coords) > MAX_VERTEX_COUNT:
                raise GeometryTooComplexError(offset + len(coords), MAX_VERTEX_COUNT)

            verts = np.asarray(coords, dtype=np.float64).reshape(-1, 2)
            ring_ends = np.cumsum([len(ring) for ring in rings]).astype(np.uint32)
            try:
                result = earcut.triangulate_float64(verts, ring_ends)
            except (RuntimeError, ValueError) as e:
                raise TessellationError(str(e)) from e

            vertices.extend(Point(float(x), float(y)) for x, y in coords)

            tri = [int(i) for i in result]
            for k in range(0, len(tri) - 2, 3):
                a, b, c = tri[k] + offset, tri[k + 1] + offset, tri[k + 2] + offset
                if signed_area(vertices[a], vertices[b], vertices[c]) < 0:
                    b, c = c, b
                indices.extend((a, b, c))

        return Mesh2D(vertices=vertices, indices=indices)
