"""Diagnostic rendering of lattice content."""

from latticekit.display.board import render_board

__all__ = ["render_board"]
