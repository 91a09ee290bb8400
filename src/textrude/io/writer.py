"""STL writer for extruded text solids.

This module provides the StlWriter class, which renders a triangle list as
an ASCII STL solid using numpy-stl, either into a file or onto a binary
stream such as stdout.
"""

import sys
from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

import numpy as np
from stl import Mode
from stl import mesh as stl_mesh

from textrude.domain.mesh import Triangle3D
from textrude.exceptions import StlWriteError

DEFAULT_SOLID_NAME = "mesh"


def triangles_to_stl_mesh(triangles: Sequence[Triangle3D], name: str) -> stl_mesh.Mesh:
    """Pack triangles into a numpy-stl mesh.

    Normals are taken as given; numpy-stl is not allowed to recompute them
    or to drop zero-area facets.

    Args:
        triangles: Facets in output order
        name: Solid name written to the STL header

    Returns:
        numpy-stl Mesh holding the facets
    """
    data = np.zeros(len(triangles), dtype=stl_mesh.Mesh.dtype)
    for i, triangle in enumerate(triangles):
        data["normals"][i] = triangle.normal
        data["vectors"][i] = triangle.vertices

    return stl_mesh.Mesh(
        data,
        calculate_normals=False,
        remove_empty_areas=False,
        name=name,
    )


class StlWriter:
    """Writes triangle lists as ASCII STL.

    Example:
        writer = StlWriter(Path("hello.stl"))
        writer.write(triangles)

        StlWriter().write(triangles)  # to stdout
    """

    def __init__(self, output_path: Path | None = None) -> None:
        """Initialize the writer.

        Args:
            output_path: Target file, or None to write to stdout
        """
        self._output_path = output_path

    @property
    def output_path(self) -> Path | None:
        """Target file, None for stdout."""
        return self._output_path

    @property
    def solid_name(self) -> str:
        """Solid name: the file stem, or 'mesh' for stream output."""
        if self._output_path is None or not self._output_path.stem:
            return DEFAULT_SOLID_NAME
        return self._output_path.stem

    def write(self, triangles: Sequence[Triangle3D]) -> None:
        """Write the triangles to the configured destination.

        Args:
            triangles: Facets in output order

        Raises:
            StlWriteError: If the destination cannot be written
        """
        if self._output_path is None:
            self.write_to_stream(triangles, sys.stdout.buffer)
            return

        try:
            with open(self._output_path, "wb") as fh:
                self.write_to_stream(triangles, fh)
        except OSError as e:
            raise StlWriteError(str(self._output_path), str(e)) from e

    def write_to_stream(self, triangles: Sequence[Triangle3D], fh: BinaryIO) -> None:
        """Write the triangles onto an open binary stream.

        Args:
            triangles: Facets in output order
            fh: Binary stream to write to
        """
        name = self.solid_name
        stl = triangles_to_stl_mesh(triangles, name)
        stl.save(name, fh=fh, mode=Mode.ASCII, update_normals=False)
        fh.flush()
