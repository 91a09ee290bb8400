"""Command-line interface for textrude.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- STL to stdout by default, or to a file with --output
- Quiet mode for scripting
- Detailed error reporting naming the failing stage
"""

from textrude.cli.app import cli, main

__all__ = ["cli", "main"]
