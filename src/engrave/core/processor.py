"""One-shot render pipeline: font -> layout -> SVG/DXF files.

This module coordinates the batch workflow used by the CLI. Interactive
callers use the same LayoutEngine/ExportFormatter pair through render() and
format methods, so preview and export share one set of conventions.
"""

import time
from dataclasses import dataclass
from pathlib import Path

from engrave.config import EngraveSettings
from engrave.core.export import ExportFormatter
from engrave.core.layout import LayoutEngine
from engrave.domain import FontSource, LayoutResult
from engrave.io import DxfWriter, FontReader, write_svg
from engrave.utils import RenderLogger, RenderStats


@dataclass
class ExportReport:
    """Outcome of a render run.

    Attributes:
        result: The layout that was exported
        svg_path: Written SVG file (None when SVG export is off)
        dxf_path: Written DXF file (None when DXF export is off)
        stats: Run statistics collected by the logger
    """

    result: LayoutResult
    svg_path: Path | None
    dxf_path: Path | None
    stats: RenderStats


class Engraver:
    """Orchestrates loading, layout and export.

    Example:
        engraver = Engraver(EngraveSettings())
        report = engraver.run(Path("font.ttf"), "Hello")
    """

    def __init__(self, settings: EngraveSettings, logger: RenderLogger | None = None) -> None:
        """Initialize the engraver.

        Args:
            settings: Application settings
            logger: Structured logging sink shared by layout and export
        """
        self.settings = settings
        self.logger = logger if logger is not None else RenderLogger()
        self.formatter = ExportFormatter(settings.export, self.logger)

    def render(self, font: FontSource, text: str) -> LayoutResult:
        """Lay out text with a loaded font."""
        engine = LayoutEngine(font, self.settings.layout, self.logger)
        return engine.layout(text)

    def export(self, result: LayoutResult, output_dir: Path | None = None) -> ExportReport:
        """Write the enabled export formats.

        Args:
            result: Layout to export
            output_dir: Directory override (defaults to the export config)

        Returns:
            Report with the written paths

        Raises:
            ExportWriteError: If a file cannot be written
        """
        config = self.settings.export
        directory = output_dir if output_dir is not None else config.output_dir
        svg_path = dxf_path = None

        if config.svg:
            svg_path = write_svg(
                self.formatter.svg_document(result), directory / f"{config.basename}.svg"
            )
            self.logger.log_file_written("svg", svg_path)

        if config.dxf:
            writer = DxfWriter()
            writer.add_polylines(self.formatter.dxf_polylines(result))
            dxf_path = writer.save(directory / f"{config.basename}.dxf")
            self.logger.log_file_written("dxf", dxf_path)

        return ExportReport(
            result=result,
            svg_path=svg_path,
            dxf_path=dxf_path,
            stats=self.logger.stats,
        )

    def run(self, font_path: Path, text: str, output_dir: Path | None = None) -> ExportReport:
        """Load a font, lay out text and export it.

        Raises:
            FontLoadError: If the font cannot be loaded
            ConfigurationError: If the layout parameters are unusable
            ExportWriteError: If an output file cannot be written
        """
        stats = self.logger.stats
        stats.start_time = time.time()

        with FontReader(font_path) as reader:
            result = self.render(reader, text)

        report = self.export(result, output_dir)
        stats.end_time = time.time()
        return report
