"""Unit tests for configuration models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from engrave.config import (
    EngraveSettings,
    ExportConfig,
    LayoutConfig,
    LoggingConfig,
    OriginPolicy,
    get_default_settings,
)


class TestLayoutConfig:
    """Tests for LayoutConfig."""

    def test_defaults(self):
        config = LayoutConfig()
        assert config.height_mm == 10.0
        assert config.width_mm is None
        assert config.kerning is False
        assert config.letter_spacing_mm == 0.0
        assert config.origin == OriginPolicy.NONE

    def test_effective_line_spacing(self):
        assert LayoutConfig(height_mm=10.0).effective_line_spacing == pytest.approx(12.0)
        assert LayoutConfig(line_spacing_mm=5.0).effective_line_spacing == 5.0
        assert LayoutConfig(line_spacing_mm=0.0).effective_line_spacing == 0.0

    @pytest.mark.parametrize("height", [0.0, -1.0])
    def test_height_must_be_positive(self, height):
        with pytest.raises(ValidationError):
            LayoutConfig(height_mm=height)

    def test_width_must_be_positive(self):
        with pytest.raises(ValidationError):
            LayoutConfig(width_mm=0.0)

    def test_negative_letter_spacing_allowed(self):
        assert LayoutConfig(letter_spacing_mm=-0.5).letter_spacing_mm == -0.5

    def test_frozen(self):
        config = LayoutConfig()
        with pytest.raises(ValidationError):
            config.height_mm = 20.0

    def test_origin_from_string(self):
        assert LayoutConfig(origin="center").origin == OriginPolicy.CENTER


class TestExportConfig:
    """Tests for ExportConfig."""

    def test_defaults(self):
        config = ExportConfig()
        assert config.svg and config.dxf
        assert not config.separate
        assert config.tolerance_mm == 0.1
        assert config.output_dir == Path("out")
        assert config.basename == "text"

    @pytest.mark.parametrize("tolerance", [0.0, -0.1, 11.0])
    def test_tolerance_range(self, tolerance):
        with pytest.raises(ValidationError):
            ExportConfig(tolerance_mm=tolerance)

    def test_empty_basename(self):
        with pytest.raises(ValidationError):
            ExportConfig(basename="")


class TestSettings:
    """Tests for EngraveSettings."""

    def test_default_settings(self):
        settings = get_default_settings()
        assert isinstance(settings, EngraveSettings)
        assert settings.layout == LayoutConfig()
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_nested_from_dict(self):
        settings = EngraveSettings.model_validate(
            {"layout": {"height_mm": 12, "kerning": True}, "export": {"separate": True}}
        )
        assert settings.layout.height_mm == 12.0
        assert settings.layout.kerning
        assert settings.export.separate


class TestLoggingConfig:
    """Tests for LoggingConfig."""

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR"])
    def test_known_levels(self, level):
        assert LoggingConfig(log_level=level, file_log_level=level).log_level == level

    @pytest.mark.parametrize("field", ["log_level", "file_log_level"])
    def test_unknown_level_rejected(self, field):
        with pytest.raises(ValidationError):
            LoggingConfig(**{field: "LOUD"})
