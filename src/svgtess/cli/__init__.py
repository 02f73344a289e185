"""Command-line interface for svgtess.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- JSON or NumPy geometry output
- Document inspection mode
- Verbose/quiet output modes
- Detailed error reporting
"""

from svgtess.cli.app import cli, main

__all__ = ["cli", "main"]
