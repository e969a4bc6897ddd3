"""Command-line interface for fontmelt.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Per-face summaries of fonts and collections
- Glyph descriptor tables
- SVG export of glyph outlines
- JSON output for every command
"""

from fontmelt.cli.app import cli, main

__all__ = ["cli", "main"]
