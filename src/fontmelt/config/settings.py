"""Configuration settings for fontmelt."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class ShapeStyle(BaseModel):
    """Style options for glyph shape rendering.

    Glyph outlines are converted from design units to points with a fixed
    factor of 1 / 0.75; ``scaling`` is applied on top of that conversion.
    """

    model_config = ConfigDict(frozen=True)

    scaling: float = Field(
        default=1.0,
        gt=0.0,
        allow_inf_nan=False,
        description="Uniform multiplier applied after unit conversion",
    )


class ProcessingConfig(BaseModel):
    """Configuration for batch processing."""

    max_workers: int = Field(
        default=1,
        ge=1,
        description="Worker processes for collection introspection (1 = sequential)",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (no file output when unset)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class MeltSettings(BaseModel):
    """Main application settings."""

    shape: ShapeStyle = Field(default_factory=ShapeStyle)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> MeltSettings:
    """Get default application settings."""
    return MeltSettings()
