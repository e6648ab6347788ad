"""Configuration management for engrave.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LayoutConfig: Text layout settings (height, spacing, kerning, origin)
- ExportConfig: SVG/DXF export settings
- LoggingConfig: Logging settings
- EngraveSettings: Main application settings
"""

from engrave.config.settings import (
    EngraveSettings,
    ExportConfig,
    LayoutConfig,
    LoggingConfig,
    OriginPolicy,
    get_default_settings,
)

__all__ = [
    "EngraveSettings",
    "ExportConfig",
    "LayoutConfig",
    "LoggingConfig",
    "OriginPolicy",
    "get_default_settings",
]
