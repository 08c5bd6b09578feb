"""Command-line interface for LatticeKit.

This module provides the CLI using Typer with rich output.

Commands:
- select: Show the digital set variant chosen for a workload
- disk: Digitize a disk and report size, bounds and timing
"""

from latticekit.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
