"""Utility functions for engrave.

This module provides utility functions including:

- Logging setup and configuration
- The injectable RenderLogger sink and run statistics
"""

from engrave.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
