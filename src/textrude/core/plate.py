"""Backing plate generation.

The plate is a rectangle covering the text mesh's bounding box plus a
margin on all four sides, extruded with its own thickness and placed
directly behind the text so the two solids share a face.
"""

from textrude.core.extrusion import extrude_mesh_with_offset
from textrude.core.geometry import mesh_bounds
from textrude.domain import Mesh2D, Orientation, Point, Triangle3D
from textrude.utils.logging import ConversionLogger


def rectangle_mesh(min_x: float, max_x: float, min_y: float, max_y: float) -> Mesh2D:
    """Build a two-triangle rectangle mesh.

    Args:
        min_x: Left edge
        max_x: Right edge
        min_y: Bottom edge
        max_y: Top edge

    Returns:
        Mesh with 4 counter-clockwise vertices and 2 triangles
    """
    return Mesh2D(
        vertices=[
            Point(min_x, min_y),
            Point(max_x, min_y),
            Point(max_x, max_y),
            Point(min_x, max_y),
        ],
        indices=[0, 1, 2, 0, 2, 3],
    )


def plate_offset(text_depth: float, plate_thickness: float) -> float:
    """Extrusion-axis center of a plate touching the back of the text."""
    return -(text_depth * 0.5 + plate_thickness * 0.5)


def build_plate(
    text_mesh: Mesh2D,
    text_depth: float,
    thickness: float,
    margin: float,
    orientation: Orientation,
    logger: ConversionLogger | None = None,
) -> list[Triangle3D]:
    """Generate the backing plate for a text mesh.

    Args:
        text_mesh: Planar text mesh (after centering, if any)
        text_depth: Extrusion depth of the text
        thickness: Plate thickness; non-positive values disable the plate
        margin: Extra size on every side of the text bounds
        orientation: Output orientation

    Returns:
        Plate triangles, or an empty list when the plate is disabled or the
        text mesh has no vertices
    """
    if thickness <= 0.0:
        return []

    bounds = mesh_bounds(text_mesh)
    if bounds is None:
        if logger is not None:
            logger.log_plate_skipped("text mesh is empty")
        return []

    min_x, max_x, min_y, max_y = bounds
    plate = rectangle_mesh(min_x - margin, max_x + margin, min_y - margin, max_y + margin)
    offset = plate_offset(text_depth, thickness)
    triangles = extrude_mesh_with_offset(plate, thickness, orientation, offset, logger=logger)

    if logger is not None:
        logger.log_extrusion("plate", len(triangles), thickness, offset)
    return triangles
