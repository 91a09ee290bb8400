"""Conversion pipeline orchestration.

This module runs the full text to solid conversion in sequence:
layout -> tessellation -> centering -> extrusion (+ plate) -> STL output.

Key components:
- ConversionResult: Triangles and intermediate data of one run
- TextSolidBuilder: Main orchestrator class
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from textrude.config import TextrudeSettings
from textrude.core.extrusion import extrude_mesh
from textrude.core.geometry import center_mesh_xy
from textrude.core.layout import TextLayout, convert_escapes
from textrude.core.plate import build_plate
from textrude.core.tessellator import Tessellator
from textrude.domain import Mesh2D, Triangle3D
from textrude.exceptions import TextrudeError
from textrude.io import FontFace, StlWriter
from textrude.utils import ConversionLogger, ConversionStats, configure_logging

T = TypeVar("T")


@dataclass
class ConversionResult:
    """Outcome of one conversion.

    Attributes:
        triangles: Plate triangles (if any) followed by text triangles
        text_mesh: Planar text mesh after centering
        tolerance: Flattening tolerance that was used
        stats: Conversion statistics
    """

    triangles: list[Triangle3D]
    text_mesh: Mesh2D
    tolerance: float
    stats: ConversionStats

    @property
    def is_empty(self) -> bool:
        """Whether no geometry was produced."""
        return len(self.triangles) == 0


class TextSolidBuilder:
    """Orchestrates the text to solid conversion.

    Manages the complete workflow:
    1. Convert escapes and lay out the text into an outline path
    2. Tessellate the outline into a planar mesh
    3. Optionally center the mesh on the origin
    4. Extrude the text and, optionally, a backing plate
    5. Write the triangles as ASCII STL

    Every stage either completes or raises; no partial output is written.

    Example:
        settings = TextrudeSettings()
        builder = TextSolidBuilder(settings)
        result = builder.convert("Hello", output_path=Path("hello.stl"))
    """

    def __init__(self, config: TextrudeSettings, quiet: bool = False) -> None:
        """Initialize the builder with configuration.

        Args:
            config: Textrude settings
            quiet: Suppress console logging below ERROR
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )

    def load_face(self, font_path: Path | None) -> FontFace:
        """Load the requested font, or the system default when None."""
        if font_path is None:
            return self._stage("font", FontFace.load_default)
        return self._stage(
            "font",
            lambda: FontFace.from_path(font_path, self.config.text.face_index),
        )

    def build(self, text: str, face: FontFace) -> ConversionResult:
        """Convert text into triangles without writing anything.

        Args:
            text: Raw input text
            face: Loaded font face

        Returns:
            ConversionResult with the complete triangle list

        Raises:
            TextrudeError: If any stage fails; `stage` names the stage
        """
        conversion_logger = ConversionLogger(self.logger)
        stats = conversion_logger.stats
        stats.start_time = time.time()

        cfg = self.config
        conversion_logger.log_font_loaded(face.source, face.units_per_em, cfg.text.face_index)

        if cfg.text.convert_escapes:
            text = convert_escapes(text)

        layout = TextLayout.from_config(face, cfg.text, logger=conversion_logger)
        path = self._stage("layout", lambda: layout.layout(text))

        tolerance = cfg.tessellation.resolve_tolerance(cfg.text.size)
        tessellator = Tessellator(tolerance, logger=conversion_logger)
        mesh = self._stage("tessellation", lambda: tessellator.tessellate(path))

        if cfg.extrusion.center:
            center_mesh_xy(mesh)

        triangles: list[Triangle3D] = []
        if cfg.plate.enabled:
            triangles.extend(
                build_plate(
                    mesh,
                    text_depth=cfg.extrusion.depth,
                    thickness=cfg.plate.thickness,
                    margin=cfg.plate.margin,
                    orientation=cfg.extrusion.orientation,
                    logger=conversion_logger,
                )
            )

        text_triangles = extrude_mesh(
            mesh,
            cfg.extrusion.depth,
            cfg.extrusion.orientation,
            logger=conversion_logger,
        )
        conversion_logger.log_extrusion("text", len(text_triangles), cfg.extrusion.depth, 0.0)
        triangles.extend(text_triangles)

        stats.end_time = time.time()
        return ConversionResult(
            triangles=triangles,
            text_mesh=mesh,
            tolerance=tolerance,
            stats=stats,
        )

    def convert(
        self,
        text: str,
        font_path: Path | None = None,
        output_path: Path | None = None,
    ) -> ConversionResult:
        """Convert text and write the STL.

        Args:
            text: Raw input text
            font_path: Font file, or None for the system default
            output_path: STL file, or None for stdout

        Returns:
            ConversionResult of the run
        """
        face = self.load_face(font_path)
        try:
            result = self.build(text, face)
        finally:
            face.close()

        self.write(result, output_path)
        return result

    def write(self, result: ConversionResult, output_path: Path | None = None) -> None:
        """Write a conversion result as ASCII STL.

        Args:
            result: Result returned by build()
            output_path: STL file, or None for stdout
        """
        writer = StlWriter(output_path)
        self._stage("output", lambda: writer.write(result.triangles))

    def _stage(self, stage: str, func: Callable[[], T]) -> T:
        """Run one stage, tagging and logging any Textrude error."""
        try:
            return func()
        except TextrudeError as e:
            e.stage = stage
            self.logger.error(
                "Conversion failed",
                stage=stage,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
