"""Utility functions for textrude.

This module provides utility functions including:

- Logging setup and configuration
- Conversion statistics tracking
"""

from textrude.utils.logging import (
    ConversionLogger,
    ConversionStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "ConversionLogger",
    "ConversionStats",
    "configure_logging",
    "get_logger",
]
