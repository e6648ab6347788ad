"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted step, summary and error messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console()

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
    console.print(f"\n[bold]Engrave[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_font_info(font_path: str, family: str, font_type: str, upm: int, kerning: bool) -> None:
    """Print font information.

    Args:
        font_path: Path to the font file
        family: Family name from the name table
        font_type: Font format type (e.g., "TrueType", "OpenType")
        upm: Units per em value
        kerning: Whether the font carries kerning pairs
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(font_path)
    line1.append(f" ({font_type})")
    console.print(line1)
    kern_str = "kerning pairs" if kerning else "no kerning"
    console.print(f"  {escape(family)} {SYM_DOT} {upm:,} UPM {SYM_DOT} {kern_str}")


def print_layout_info(
    lines: int,
    glyphs: int,
    width_mm: float,
    height_mm: float,
    font_height_mm: float,
) -> None:
    """Print layout summary.

    Args:
        lines: Number of text lines
        glyphs: Number of placed glyphs
        width_mm: Bounding-box width
        height_mm: Bounding-box height
        font_height_mm: Em height the layout used
    """
    console.print(f"  {lines} lines {SYM_DOT} {glyphs} glyphs {SYM_DOT} {font_height_mm:.3f} mm em")
    console.print(f"  {width_mm:.3f} × {height_mm:.3f} mm")


def print_missing_glyphs(chars: list[str]) -> None:
    """Print characters the font could not render."""
    if not chars:
        return
    unique = list(dict.fromkeys(chars))
    shown = " ".join(f"U+{ord(c):04X}" for c in unique[:10])
    if len(unique) > 10:
        shown += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(unique) - 10} more)"
    console.print(f"  [yellow]{SYM_WARN} {len(chars)} characters without glyph[/yellow] {shown}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    outputs: list[str],
    total_time_s: float,
    polylines: int,
    points: int,
) -> None:
    """Print success message with summary.

    Args:
        outputs: Written file paths
        total_time_s: Total run time in seconds
        polylines: Number of DXF polylines written
        points: Total DXF polyline vertices
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")
    for output in outputs:
        line = Text("  ")
        line.append(output, style="bold")
        console.print(line)
    if polylines:
        console.print(f"  {polylines} polylines {SYM_DOT} {points:,} points")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")
