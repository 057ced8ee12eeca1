"""Command-line interface for pathorder.

This module provides the CLI using Typer with rich output for
inspecting the order computed for a layer file.
"""

from pathorder.cli.app import cli, main

__all__ = ["cli", "main"]
