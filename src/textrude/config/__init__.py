"""Configuration management for textrude.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- TextConfig: Layout settings (size, spacing, kerning, escapes)
- TessellationConfig: Curve flattening tolerance
- ExtrusionConfig: Depth, orientation and centering
- PlateConfig: Backing plate settings
- LoggingConfig: Logging settings
- TextrudeSettings: Main application settings
"""

from textrude.config.settings import (
    MAX_TOLERANCE,
    MIN_TOLERANCE,
    ExtrusionConfig,
    LoggingConfig,
    PlateConfig,
    TessellationConfig,
    TextConfig,
    TextrudeSettings,
    get_default_settings,
)

__all__ = [
    "MAX_TOLERANCE",
    "MIN_TOLERANCE",
    "ExtrusionConfig",
    "LoggingConfig",
    "PlateConfig",
    "TessellationConfig",
    "TextConfig",
    "TextrudeSettings",
    "get_default_settings",
]
