"""Rich console output helpers for the CLI.

All console output goes to stderr; stdout is reserved for STL data when no
output file is given.
"""

from rich.console import Console
from rich.text import Text

from textrude.utils import ConversionStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Textrude[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, upm: int, face_index: int) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        upm: Units per em value
        face_index: Selected face
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    line.append(f" (face {face_index})")
    console.print(line)
    console.print(f"  {upm:,} UPM")


def print_skipped_glyphs(chars: list[str]) -> None:
    """Print characters that had no glyph in the font.

    Args:
        chars: Skipped characters in input order
    """
    if not chars:
        return
    unique = list(dict.fromkeys(chars))
    shown = " ".join(repr(c) for c in unique[:20])
    if len(unique) > 20:
        shown += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(unique) - 20} more)"
    console.print(f"  [yellow]{SYM_WARN}[/yellow] {len(chars)} characters without glyph: {shown}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(output_path: str, file_size: str, stats: ConversionStats) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        file_size: Human-readable file size string
        stats: Conversion statistics
    """
    time_str = _format_time(stats.duration_seconds)

    console.print(f"\n[bold green]{SYM_OK} Wrote[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({file_size})")
    console.print(line)

    console.print(
        f"  {stats.glyphs_placed} glyphs {SYM_DOT} {stats.triangle_count:,} triangles "
        f"{SYM_DOT} {stats.plate_triangles:,} plate"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
