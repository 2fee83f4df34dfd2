"""Command-line interface for bezierdist.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Distance, length and point evaluation commands
- JSON output for scripting
- Optional structured log file
"""

from bezierdist.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
