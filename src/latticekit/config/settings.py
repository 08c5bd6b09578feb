"""Configuration settings for LatticeKit."""

from pathlib import Path

from pydantic import BaseModel, Field

from latticekit.config.hints import SetHints, SetSize


class SelectorConfig(BaseModel):
    """Configuration for digital set selection."""

    bitmap_max_cells: int = Field(
        default=1 << 24,
        ge=1,
        description="Largest domain (in points) for which a bitmap set is allocated",
    )
    default_hints: SetHints = Field(
        default_factory=lambda: SetHints(size=SetSize.MEDIUM),
        description="Hints used when the caller gives none",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class LatticeKitSettings(BaseModel):
    """Main library settings."""

    selector: SelectorConfig = Field(default_factory=SelectorConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> LatticeKitSettings:
    """Get default library settings."""
    return LatticeKitSettings()
