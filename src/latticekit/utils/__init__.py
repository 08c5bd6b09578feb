"""Utility functions for LatticeKit.

This module provides:

- Logging setup and configuration
- Timing helpers for the CLI
"""

from latticekit.utils.logging import TimingStats, configure_logging, get_logger

__all__ = [
    "TimingStats",
    "configure_logging",
    "get_logger",
]
