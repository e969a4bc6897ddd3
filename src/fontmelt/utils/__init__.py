"""Utility functions for fontmelt.

This module provides logging setup and configuration plus run statistics.
"""

from fontmelt.utils.logging import (
    IntrospectionLogger,
    IntrospectionStats,
    configure_logging,
)

__all__ = [
    "IntrospectionLogger",
    "IntrospectionStats",
    "configure_logging",
]
