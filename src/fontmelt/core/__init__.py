"""Core introspection algorithms for fontmelt.

This module contains the components that derive each slice of a font's
introspection record:

- Name resolution (platform/encoding/language disambiguation, Mac Roman)
- Script, language and feature aggregation (GSUB, GPOS, meta)
- Em-normalized metrics
- Typesetter font info (family, variant, coverage, flags)
- Per-codepoint glyph descriptors and SVG shapes

All components are:
- Stateless (safe for use in worker processes)
- Pure functions of an open FontHandle

Key functions:
- resolve_names: Decoded name lists for the well-known name ids
- font_scripts / font_features: Script and feature sets
- font_metrics: Em-normalized metrics
- font_info: Family, variant, coverage and flags
- describe: Glyph descriptor of one codepoint
- shape: SVG shape of one codepoint

Key classes:
- PathStringPen: Outline pen emitting SVG path commands
- FontIntrospector: Batch operations over collections and codepoint lists
"""

from fontmelt.core.glyphs import describe, describe_glyph, is_scalar_value
from fontmelt.core.info import coverage_ranges, font_info
from fontmelt.core.introspector import (
    FontIntrospector,
    introspect_font,
    introspect_handle,
)
from fontmelt.core.metrics import derive_raw_metrics, font_metrics, normalize
from fontmelt.core.names import decode_mac_roman, resolve, resolve_names, resolve_record
from fontmelt.core.pen import PathStringPen
from fontmelt.core.scripts import aggregate, aggregate_features, font_features, font_scripts
from fontmelt.core.vectorizer import shape

__all__ = [
    # Introspector
    "FontIntrospector",
    "introspect_font",
    "introspect_handle",
    # Names
    "decode_mac_roman",
    "resolve",
    "resolve_names",
    "resolve_record",
    # Scripts
    "aggregate",
    "aggregate_features",
    "font_features",
    "font_scripts",
    # Metrics
    "derive_raw_metrics",
    "font_metrics",
    "normalize",
    # Info
    "coverage_ranges",
    "font_info",
    # Glyphs
    "PathStringPen",
    "describe",
    "describe_glyph",
    "is_scalar_value",
    "shape",
]
