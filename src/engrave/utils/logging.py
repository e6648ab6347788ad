"""Logging utilities for engrave."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class RenderStats:
    """Statistics from a render run."""

    lines: int = 0
    glyphs_placed: int = 0
    missing_chars: list[str] = field(default_factory=list)
    svg_paths: int = 0
    polylines: int = 0
    polyline_points: int = 0
    start_time: float | None = None
    end_time: float | None = None

    @property
    def missing_count(self) -> int:
        return len(self.missing_chars)

    @property
    def duration_seconds(self) -> float:
        """Calculate render duration."""
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

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
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

    logger = structlog.get_logger("engrave")
    logger.info("Logging initialized", log_file=str(log_file) if log_file else None)

    return logger


def _discard() -> structlog.BoundLogger:
    return structlog.wrap_logger(
        structlog.ReturnLogger(), processors=[], wrapper_class=structlog.BoundLogger
    )


class RenderLogger:
    """Structured-logging sink passed explicitly into layout and export.

    Wraps a structlog logger and accumulates RenderStats for the run, so no
    component needs a process-wide debug log. Without an explicit logger the
    sink follows configure_logging() once it has run and discards events
    until then.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        if logger is None:
            logger = structlog.get_logger("engrave") if structlog.is_configured() else _discard()
        self._logger = logger
        self._stats = RenderStats()

    @classmethod
    def silent(cls) -> "RenderLogger":
        """A sink that records stats but emits nothing."""
        return cls(_discard())

    def log_layout_start(self, lines: int, height_mm: float, kerning: bool) -> None:
        """Log start of a layout pass."""
        self._logger.debug("Layout started", lines=lines, height_mm=height_mm, kerning=kerning)
        self._stats.lines = lines

    def log_glyph_placed(self, char: str, glyph_name: str, x: float, y: float, advance: float) -> None:
        """Log a glyph placed at the cursor."""
        self._logger.debug(
            "Glyph placed",
            char=char,
            glyph=glyph_name,
            x=round(x, 3),
            y=round(y, 3),
            advance=round(advance, 3),
        )
        self._stats.glyphs_placed += 1

    def log_glyph_missing(self, char: str, line: int, column: int) -> None:
        """Log a character the font has no glyph for."""
        self._logger.warning(
            "Glyph missing",
            char=char,
            codepoint=f"U+{ord(char):04X}",
            line=line,
            column=column,
        )
        self._stats.missing_chars.append(char)

    def log_layout_complete(self, glyphs: int, width: float, height: float) -> None:
        """Log layout summary."""
        self._logger.info(
            "Layout complete",
            glyphs=glyphs,
            width_mm=round(width, 3),
            height_mm=round(height, 3),
        )

    def log_width_fit(self, width_mm: float, height_mm: float) -> None:
        """Log the height solved for a target width."""
        self._logger.info("Height fitted to width", width_mm=width_mm, height_mm=round(height_mm, 4))

    def log_svg_export(self, paths: int, separate: bool) -> None:
        """Log SVG path generation."""
        self._logger.debug("SVG paths generated", paths=paths, separate=separate)
        self._stats.svg_paths += paths

    def log_polyline(self, layer: str, points: int, closed: bool) -> None:
        """Log a flattened DXF polyline."""
        self._logger.debug("Polyline flattened", layer=layer, points=points, closed=closed)
        self._stats.polylines += 1
        self._stats.polyline_points += points

    def log_file_written(self, kind: str, path: Path) -> None:
        """Log an output file."""
        self._logger.info("File written", kind=kind, path=str(path))

    @property
    def stats(self) -> RenderStats:
        """Get current render statistics."""
        return self._stats
