"""Configuration settings for engrave."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class OriginPolicy(str, Enum):
    """Where coordinate (0, 0) falls relative to the laid-out text."""

    NONE = "none"
    LEFT_BASELINE = "left_baseline"
    CENTER = "center"


class LayoutConfig(BaseModel):
    """Configuration for text layout.

    All lengths are in millimetres. The model is frozen so that a layout run
    always works on one consistent snapshot of its parameters.
    """

    model_config = ConfigDict(frozen=True)

    height_mm: float = Field(
        default=10.0,
        gt=0.0,
        description="Font size expressed as the em height in millimetres",
    )
    width_mm: float | None = Field(
        default=None,
        gt=0.0,
        description="Target overall width; overrides height_mm when set",
    )
    kerning: bool = Field(
        default=False,
        description="Apply the font's pair kerning",
    )
    letter_spacing_mm: float = Field(
        default=0.0,
        description="Extra space added after every character",
    )
    line_spacing_mm: float | None = Field(
        default=None,
        ge=0.0,
        description="Baseline distance between lines (None = 1.2 x height)",
    )
    origin: OriginPolicy = Field(
        default=OriginPolicy.NONE,
        description="Origin placement applied after layout",
    )

    @property
    def effective_line_spacing(self) -> float:
        """Line spacing in mm, falling back to 1.2 times the height."""
        if self.line_spacing_mm is None:
            return self.height_mm * 1.2
        return self.line_spacing_mm


class ExportConfig(BaseModel):
    """Configuration for SVG and DXF export."""

    model_config = ConfigDict(frozen=True)

    svg: bool = Field(default=True, description="Write an SVG file")
    dxf: bool = Field(default=True, description="Write a DXF file")
    separate: bool = Field(
        default=False,
        description="One SVG path / DXF layer per character",
    )
    tolerance_mm: float = Field(
        default=0.1,
        gt=0.0,
        le=10.0,
        description="Arc-length step used when flattening curves for DXF",
    )
    stroke_width_mm: float = Field(
        default=0.1,
        gt=0.0,
        description="SVG stroke width",
    )
    fill: str = Field(default="none", description="SVG fill attribute")
    stroke: str = Field(default="black", description="SVG stroke attribute")
    output_dir: Path = Field(default=Path("out"), description="Output directory")
    basename: str = Field(
        default="text",
        min_length=1,
        description="File name stem for the exported files",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class EngraveSettings(BaseModel):
    """Main application settings."""

    layout: LayoutConfig = Field(default_factory=LayoutConfig)
    export: ExportConfig = Field(default_factory=ExportConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> EngraveSettings:
    """Get default application settings."""
    return EngraveSettings()
