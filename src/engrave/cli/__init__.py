"""Command-line interface for engrave.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Batch export to SVG and DXF in one run
- Verbose/quiet output modes
- Detailed error reporting with non-zero exit codes
"""

from engrave.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
