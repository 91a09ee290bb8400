"""CLI application entry point for textrude.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from textrude import __version__
from textrude.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_skipped_glyphs,
    print_step,
    print_success,
)
from textrude.config import (
    ExtrusionConfig,
    LoggingConfig,
    PlateConfig,
    TessellationConfig,
    TextConfig,
    TextrudeSettings,
)
from textrude.core import TextSolidBuilder
from textrude.domain import Orientation
from textrude.exceptions import FontError, TextrudeError

# Create the Typer app
app = typer.Typer(
    name="textrude",
    help="Extrude text into a 3D-printable ASCII STL solid.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Textrude[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def extrude(
    text: Annotated[
        str,
        typer.Argument(
            help="Text to render (a literal \\n starts a new line)",
            show_default=False,
        ),
    ],
    font: Annotated[
        Path | None,
        typer.Option(
            "--font",
            "-f",
            help="Font file (.ttf/.otf/.ttc). Falls back to a system font",
        ),
    ] = None,
    face_index: Annotated[
        int,
        typer.Option(
            "--face-index",
            help="Face index for font collections (.ttc), 0-based",
            min=0,
        ),
    ] = 0,
    size: Annotated[
        float,
        typer.Option(
            "--size",
            help="Font size (layout units per em)",
        ),
    ] = 72.0,
    tolerance: Annotated[
        float | None,
        typer.Option(
            "--tolerance",
            help="Tessellation tolerance (smaller = finer). Default scales with --size",
        ),
    ] = None,
    depth: Annotated[
        float,
        typer.Option(
            "--depth",
            help="Extrusion depth (same units as layout)",
        ),
    ] = 10.0,
    spacing: Annotated[
        float,
        typer.Option(
            "--spacing",
            help="Additional spacing between glyphs",
        ),
    ] = 0.0,
    kerning: Annotated[
        bool,
        typer.Option(
            "--kerning/--no-kerning",
            help="Apply kerning when available",
        ),
    ] = True,
    plate: Annotated[
        float,
        typer.Option(
            "--plate",
            help="Back plate thickness (0 disables)",
            min=0.0,
        ),
    ] = 0.0,
    plate_margin: Annotated[
        float,
        typer.Option(
            "--plate-margin",
            help="Margin to expand the plate",
            min=0.0,
        ),
    ] = 2.0,
    orient: Annotated[
        Orientation,
        typer.Option(
            "--orient",
            help="Plane orientation (flat: XY floor, front: XZ facing viewer)",
            case_sensitive=False,
        ),
    ] = Orientation.FRONT,
    no_escape: Annotated[
        bool,
        typer.Option(
            "--no-escape",
            help='Keep literal "\\n" (do not convert to newline)',
        ),
    ] = False,
    no_center: Annotated[
        bool,
        typer.Option(
            "--no-center",
            help="Disable auto-centering to origin",
        ),
    ] = False,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output STL file (stdout by default)",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Extrude TEXT into a closed solid and write it as ASCII STL.

    Example:
        textrude "Hello\\nWorld" --font Roboto-Regular.ttf --plate 2 -o hello.stl

    Without --output the STL is written to stdout.
    """
    if font is not None and not font.is_file():
        print_error(
            f"Font file not found: {font}",
            details=f"The file '{font}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    try:
        settings = TextrudeSettings(
            text=TextConfig(
                size=size,
                spacing=spacing,
                kerning=kerning,
                convert_escapes=not no_escape,
                face_index=face_index,
            ),
            tessellation=TessellationConfig(tolerance=tolerance),
            extrusion=ExtrusionConfig(
                depth=depth,
                orientation=orient,
                center=not no_center,
            ),
            plate=PlateConfig(thickness=plate, margin=plate_margin),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "ERROR",
            ),
        )
    except ValidationError as e:
        print_error("Invalid options", details=_format_validation_error(e))
        raise typer.Exit(code=1)

    # Status lines only when the STL does not share the terminal with them
    chatty = output is not None and not quiet

    if chatty:
        print_header(__version__)

    try:
        builder = TextSolidBuilder(settings, quiet=quiet)

        if chatty:
            print_step("Loading font")
        face = builder.load_face(font)
        if chatty:
            print_font_info(face.source, face.units_per_em, face_index)
            print_step("Extruding")

        try:
            result = builder.build(text, face)
        finally:
            face.close()

        builder.write(result, output)

        if chatty:
            print_skipped_glyphs(result.stats.skipped_chars)
            print_success(
                output_path=str(output),
                file_size=_format_file_size(output),
                stats=result.stats,
            )

    except FontError as e:
        print_error(f"Could not load font: {e}")
        raise typer.Exit(code=1)
    except TextrudeError as e:
        stage = f" during {e.stage}" if e.stage else ""
        print_error(f"Conversion failed{stage}: {e}")
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _format_validation_error(error: ValidationError) -> str:
    """Summarize pydantic validation errors as 'field: message' lines."""
    lines = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"])
        lines.append(f"{field}: {item['msg']}")
    return "\n  ".join(lines)


def _format_file_size(path: Path | None) -> str:
    """Format file size in human-readable form.

    Args:
        path: Path to file

    Returns:
        Human-readable file size (e.g., "428 KB")
    """
    if path is None:
        return "stdout"
    try:
        size_bytes = path.stat().st_size
        if size_bytes < 1024:
            return f"{size_bytes} B"
        elif size_bytes < 1024 * 1024:
            return f"{size_bytes / 1024:.0f} KB"
        else:
            return f"{size_bytes / (1024 * 1024):.1f} MB"
    except OSError:
        return "unknown"


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
