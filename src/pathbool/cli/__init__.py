"""Command-line interface for pathbool.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- One command per boolean operation plus an intersection listing
- SVG path data or font glyphs as operands
- Verbose diagnostics and quiet, pipe-friendly output
"""

from pathbool.cli.app import cli, main

__all__ = ["cli", "main"]
