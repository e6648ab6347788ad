"""CLI application entry point for engrave.

This module provides the main CLI interface using Typer.
"""

import time
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from engrave import __version__
from engrave.cli.output import (
    console,
    print_error,
    print_font_info,
    print_header,
    print_layout_info,
    print_missing_glyphs,
    print_step,
    print_success,
)
from engrave.config import (
    EngraveSettings,
    ExportConfig,
    LayoutConfig,
    LoggingConfig,
    OriginPolicy,
)
from engrave.core import Engraver
from engrave.exceptions import (
    ConfigurationError,
    EngraveError,
    ExportWriteError,
    FontLoadError,
)
from engrave.io import FontReader
from engrave.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="engrave",
    help="Convert text set in a TTF/OTF font into SVG paths and DXF polylines for CNC work.",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Engrave[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def engrave(
    font: Annotated[
        Path,
        typer.Option(
            "--font",
            "-f",
            help="Path to TTF/OTF font file",
            show_default=False,
        ),
    ],
    text: Annotated[
        str,
        typer.Option(
            "--text",
            "-t",
            help="Text to convert (use \\n for line breaks)",
            show_default=False,
        ),
    ],
    height_mm: Annotated[
        float,
        typer.Option("--height-mm", help="Target text height (em size) in mm"),
    ] = 10.0,
    width_mm: Annotated[
        float | None,
        typer.Option("--width-mm", help="Target overall width in mm (overrides height)"),
    ] = None,
    kerning: Annotated[
        bool,
        typer.Option("--kerning", help="Enable kerning"),
    ] = False,
    letter_spacing: Annotated[
        float,
        typer.Option("--letter-spacing", help="Extra letter spacing in mm"),
    ] = 0.0,
    line_spacing: Annotated[
        float | None,
        typer.Option("--line-spacing", help="Line spacing in mm (default: 1.2 x height)"),
    ] = None,
    separate: Annotated[
        bool,
        typer.Option("--separate", help="Export per-character layers"),
    ] = False,
    tolerance: Annotated[
        float,
        typer.Option("--tolerance", help="Curve flattening tolerance in mm"),
    ] = 0.1,
    origin_left: Annotated[
        bool,
        typer.Option("--origin-left", help="Origin at left baseline"),
    ] = False,
    origin_center: Annotated[
        bool,
        typer.Option("--origin-center", help="Origin at the bounding box centre"),
    ] = False,
    svg: Annotated[
        bool,
        typer.Option("--svg/--no-svg", help="Export SVG"),
    ] = True,
    dxf: Annotated[
        bool,
        typer.Option("--dxf/--no-dxf", help="Export DXF"),
    ] = True,
    out: Annotated[
        Path,
        typer.Option("--out", "-o", help="Output directory"),
    ] = Path("out"),
    stroke_width: Annotated[
        float,
        typer.Option("--stroke-width", help="SVG stroke width in mm"),
    ] = 0.1,
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
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
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
    """Convert text to engraving geometry.

    Lays out the text with the given font, converts it to millimetres and
    writes text.svg and/or text.dxf into the output directory.

    Example:
        engrave --font Roboto-Regular.ttf --text "Hello" --height-mm 12 --dxf
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if origin_left and origin_center:
        print_error("Cannot use --origin-left and --origin-center together")
        raise typer.Exit(code=1)

    if not svg and not dxf:
        print_error("Nothing to export", details="Enable at least one of --svg or --dxf.")
        raise typer.Exit(code=1)

    if origin_left:
        origin = OriginPolicy.LEFT_BASELINE
    elif origin_center:
        origin = OriginPolicy.CENTER
    else:
        origin = OriginPolicy.NONE

    # Create settings from CLI arguments
    try:
        settings = EngraveSettings(
            layout=LayoutConfig(
                height_mm=height_mm,
                width_mm=width_mm,
                kerning=kerning,
                letter_spacing_mm=letter_spacing,
                line_spacing_mm=line_spacing,
                origin=origin,
            ),
            export=ExportConfig(
                svg=svg,
                dxf=dxf,
                separate=separate,
                tolerance_mm=tolerance,
                stroke_width_mm=stroke_width,
                output_dir=out,
            ),
            logging=LoggingConfig(
                log_file=log_file,
                log_level="DEBUG" if verbose else log_level.upper(),
            ),
        )
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        print_error("Invalid configuration", details=details)
        raise typer.Exit(code=1)

    if not quiet:
        print_header(__version__)

    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    render_logger = RenderLogger(logger)
    engraver = Engraver(settings, render_logger)
    start_time = time.time()

    try:
        if not quiet:
            print_step("Loading font")

        with FontReader(font) as reader:
            if not quiet:
                print_font_info(
                    font_path=str(font),
                    family=reader.family_name,
                    font_type=reader.format,
                    upm=reader.units_per_em,
                    kerning=reader.has_kerning,
                )
                print_step("Laying out text")

            result = engraver.render(reader, text.replace("\\n", "\n"))

        if not quiet:
            bbox = result.bbox
            print_layout_info(
                lines=len(result.lines),
                glyphs=len(result.glyphs),
                width_mm=bbox.width if bbox else 0.0,
                height_mm=bbox.height if bbox else 0.0,
                font_height_mm=result.height_mm,
            )
            print_missing_glyphs(list(result.missing))
            print_step("Exporting")

        report = engraver.export(result)

        if not quiet:
            print_success(
                outputs=[str(p) for p in (report.svg_path, report.dxf_path) if p is not None],
                total_time_s=time.time() - start_time,
                polylines=report.stats.polylines,
                points=report.stats.polyline_points,
            )

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except ExportWriteError as e:
        print_error(f"Could not write output: {e.reason}")
        raise typer.Exit(code=1)
    except EngraveError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
