"""Configuration management for fontmelt.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, request payloads or defaults.

Key classes:
- ShapeStyle: Glyph shape rendering options
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- MeltSettings: Main application settings
"""

from fontmelt.config.settings import (
    LoggingConfig,
    MeltSettings,
    ProcessingConfig,
    ShapeStyle,
    get_default_settings,
)

__all__ = [
    "LoggingConfig",
    "MeltSettings",
    "ProcessingConfig",
    "ShapeStyle",
    "get_default_settings",
]
