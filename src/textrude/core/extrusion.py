"""Extrusion of planar meshes into closed solids.

A planar mesh of depth d becomes:
- a top cap at +d/2 (original winding, normal towards +depth),
- a bottom cap at -d/2 (reversed winding, normal towards -depth),
- side walls, two triangles per boundary edge, joining the caps.

Both caps may be shifted along the extrusion axis by an offset, which is
how the backing plate is placed behind the text.
"""

from textrude.core.boundary import edge_census
from textrude.core.geometry import map_point, triangle_with_normal
from textrude.domain import Mesh2D, Orientation, Triangle3D
from textrude.utils.logging import ConversionLogger


def extrude_mesh_with_offset(
    mesh: Mesh2D,
    depth: float,
    orientation: Orientation,
    z_offset: float,
    logger: ConversionLogger | None = None,
) -> list[Triangle3D]:
    """Extrude a planar mesh into a closed solid centered on z_offset.

    Args:
        mesh: Counter-clockwise planar mesh
        depth: Distance between the caps
        orientation: Output orientation applied to every vertex
        z_offset: Center of the solid along the extrusion axis
        logger: Conversion logger for edge diagnostics

    Returns:
        Top cap, bottom cap and side wall triangles, in that order
    """
    z_top = depth * 0.5 + z_offset
    z_bottom = -depth * 0.5 + z_offset
    vertices = mesh.vertices
    triangles: list[Triangle3D] = []

    tris = mesh.triangles()

    for a, b, c in tris:
        triangles.append(
            triangle_with_normal(
                map_point(vertices[a], z_top, orientation),
                map_point(vertices[b], z_top, orientation),
                map_point(vertices[c], z_top, orientation),
            )
        )

    # Reversed winding so the normal points away from the top cap
    for a, b, c in tris:
        triangles.append(
            triangle_with_normal(
                map_point(vertices[c], z_bottom, orientation),
                map_point(vertices[b], z_bottom, orientation),
                map_point(vertices[a], z_bottom, orientation),
            )
        )

    census = edge_census(mesh.indices)
    if logger is not None:
        logger.log_edge_census(len(census.boundary), census.non_manifold_count)

    for i0, i1 in census.boundary:
        p0 = vertices[i0]
        p1 = vertices[i1]

        top0 = map_point(p0, z_top, orientation)
        top1 = map_point(p1, z_top, orientation)
        bottom0 = map_point(p0, z_bottom, orientation)
        bottom1 = map_point(p1, z_bottom, orientation)

        # Quad split along the top0-bottom1 diagonal, wound so that a
        # counter-clockwise boundary edge yields an outward normal
        triangles.append(triangle_with_normal(top0, bottom1, top1))
        triangles.append(triangle_with_normal(top0, bottom0, bottom1))

    return triangles


def extrude_mesh(
    mesh: Mesh2D,
    depth: float,
    orientation: Orientation,
    logger: ConversionLogger | None = None,
) -> list[Triangle3D]:
    """Extrude a planar mesh into a closed solid centered on zero."""
    return extrude_mesh_with_offset(mesh, depth, orientation, 0.0, logger=logger)
