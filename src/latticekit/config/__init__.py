"""Configuration management for LatticeKit.

This module provides configuration using Pydantic models.

Key classes:
- SetHints: Expected workload of a digital set, with the *_DS flag constants
- SelectorConfig: Digital set selection settings
- LoggingConfig: Logging settings
- LatticeKitSettings: Main settings
"""

from latticekit.config.hints import (
    BIG_DS,
    HIGH_BEL_DS,
    HIGH_ITER_DS,
    HIGH_VAR_DS,
    LOW_BEL_DS,
    LOW_ITER_DS,
    LOW_VAR_DS,
    MEDIUM_DS,
    SMALL_DS,
    IterationFrequency,
    MembershipFrequency,
    SetHints,
    SetSize,
    Variability,
    as_hints,
)
from latticekit.config.settings import (
    LatticeKitSettings,
    LoggingConfig,
    SelectorConfig,
    get_default_settings,
)

__all__ = [
    "BIG_DS",
    "HIGH_BEL_DS",
    "HIGH_ITER_DS",
    "HIGH_VAR_DS",
    "LOW_BEL_DS",
    "LOW_ITER_DS",
    "LOW_VAR_DS",
    "MEDIUM_DS",
    "SMALL_DS",
    "IterationFrequency",
    "LatticeKitSettings",
    "LoggingConfig",
    "MembershipFrequency",
    "SelectorConfig",
    "SetHints",
    "SetSize",
    "Variability",
    "as_hints",
    "get_default_settings",
]
