"""Configuration settings for Textrude."""

from pathlib import Path

from pydantic import BaseModel, Field

from textrude.domain.mesh import Orientation

DEFAULT_TOLERANCE = 0.01
DEFAULT_TOLERANCE_SIZE = 72.0
MIN_TOLERANCE = 0.0005
MAX_TOLERANCE = 0.2


class TextConfig(BaseModel):
    """Configuration for text layout."""

    size: float = Field(
        default=72.0,
        gt=0.0,
        description="Font size in layout units per em",
    )
    spacing: float = Field(
        default=0.0,
        description="Additional spacing added after every glyph",
    )
    kerning: bool = Field(
        default=True,
        description="Apply pair kerning from the font's kern table",
    )
    convert_escapes: bool = Field(
        default=True,
        description="Turn a literal backslash-n into a line break",
    )
    face_index: int = Field(
        default=0,
        ge=0,
        description="Face index for font collections (.ttc)",
    )


class TessellationConfig(BaseModel):
    """Configuration for outline tessellation.

    The default tolerance is specified for a 72 unit font size and scales
    linearly with the requested size.
    """

    tolerance: float | None = Field(
        default=None,
        gt=0.0,
        description="Curve flattening tolerance (None = scale with size)",
    )

    def resolve_tolerance(self, size: float) -> float:
        """Resolve the effective tolerance for a font size.

        Args:
            size: Requested font size

        Returns:
            Explicit or size-scaled tolerance, clamped to the supported range
        """
        scaled = DEFAULT_TOLERANCE * (size / DEFAULT_TOLERANCE_SIZE)
        value = self.tolerance if self.tolerance is not None else scaled
        return min(max(value, MIN_TOLERANCE), MAX_TOLERANCE)


class ExtrusionConfig(BaseModel):
    """Configuration for extrusion."""

    depth: float = Field(
        default=10.0,
        gt=0.0,
        description="Extrusion depth in layout units",
    )
    orientation: Orientation = Field(
        default=Orientation.FRONT,
        description="Flat (XY floor) or front (XZ facing viewer)",
    )
    center: bool = Field(
        default=True,
        description="Center the text mesh on the origin before extrusion",
    )


class PlateConfig(BaseModel):
    """Configuration for the backing plate."""

    thickness: float = Field(
        default=0.0,
        ge=0.0,
        description="Plate thickness (0 disables the plate)",
    )
    margin: float = Field(
        default=2.0,
        ge=0.0,
        description="Margin added around the text bounding box",
    )

    @property
    def enabled(self) -> bool:
        """Whether a plate should be generated."""
        return self.thickness > 0.0


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class TextrudeSettings(BaseModel):
    """Main application settings."""

    text: TextConfig = Field(default_factory=TextConfig)
    tessellation: TessellationConfig = Field(default_factory=TessellationConfig)
    extrusion: ExtrusionConfig = Field(default_factory=ExtrusionConfig)
    plate: PlateConfig = Field(default_factory=PlateConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> TextrudeSettings:
    """Get default application settings."""
    return TextrudeSettings()
