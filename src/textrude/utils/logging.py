"""Logging utilities for Textrude."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

_HANDLER_MARKER = "_textrude_handler"


@dataclass
class ConversionStats:
    """Statistics from a conversion run."""

    glyphs_placed: int = 0
    glyphs_skipped: int = 0
    line_breaks: int = 0
    text_triangles: int = 0
    plate_triangles: int = 0
    boundary_edges: int = 0
    non_manifold_edges: int = 0
    skipped_chars: list[str] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def triangle_count(self) -> int:
        """Total number of emitted triangles."""
        return self.text_triangles + self.plate_triangles

    @property
    def duration_seconds(self) -> float:
        """Calculate conversion duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console records go to stderr so that stdout stays free for STL output.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces handlers installed by a previous call
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_MARKER, True)
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(
        logging.ERROR if quiet else getattr(logging, console_level.upper())
    )
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_MARKER, True)
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("textrude")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


def get_logger(name: str = "textrude") -> structlog.stdlib.BoundLogger:
    """Return a structlog logger without touching the global configuration."""
    return structlog.get_logger(name)


class ConversionLogger:
    """Logger for tracking conversion progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._stats = ConversionStats()

    def log_font_loaded(self, font_path: str, units_per_em: int, face_index: int) -> None:
        """Log font selection."""
        self._logger.debug(
            "Font loaded",
            font=font_path,
            upm=units_per_em,
            face_index=face_index,
        )

    def log_glyph_placed(self, char: str, glyph_name: str, pen_x: float, baseline: float) -> None:
        """Log a glyph emitted into the path."""
        self._logger.debug(
            "Glyph placed",
            char=char,
            glyph=glyph_name,
            pen_x=round(pen_x, 3),
            baseline=round(baseline, 3),
        )
        self._stats.glyphs_placed += 1

    def log_glyph_missing(self, char: str) -> None:
        """Log a character without a glyph in the font."""
        self._logger.warning("Skip missing glyph", char=char, codepoint=f"U+{ord(char):04X}")
        self._stats.glyphs_skipped += 1
        self._stats.skipped_chars.append(char)

    def log_line_break(self, baseline: float) -> None:
        """Log a newline in the input text."""
        self._logger.debug("Line break", baseline=round(baseline, 3))
        self._stats.line_breaks += 1

    def log_tessellation(self, vertices: int, triangles: int, tolerance: float) -> None:
        """Log tessellation results."""
        self._logger.info(
            "Outline tessellated",
            vertices=vertices,
            triangles=triangles,
            tolerance=tolerance,
        )

    def log_edge_census(self, boundary: int, non_manifold: int) -> None:
        """Log boundary detection results."""
        self._logger.debug("Boundary edges detected", boundary=boundary, non_manifold=non_manifold)
        self._stats.boundary_edges += boundary
        self._stats.non_manifold_edges += non_manifold
        if non_manifold:
            self._logger.warning(
                "Non-manifold edges ignored",
                count=non_manifold,
                hint="outline may be self-intersecting",
            )

    def log_extrusion(self, part: str, triangles: int, depth: float, offset: float) -> None:
        """Log an extruded part (text or plate)."""
        self._logger.info(
            "Mesh extruded",
            part=part,
            triangles=triangles,
            depth=depth,
            offset=offset,
        )
        if part == "plate":
            self._stats.plate_triangles += triangles
        else:
            self._stats.text_triangles += triangles

    def log_plate_skipped(self, reason: str) -> None:
        """Log a plate that was requested but not generated."""
        self._logger.info("Plate skipped", reason=reason)

    @property
    def stats(self) -> ConversionStats:
        """Get current conversion statistics."""
        return self._stats
