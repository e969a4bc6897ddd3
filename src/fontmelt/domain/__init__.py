"""Domain models for fontmelt.

This module contains the value types fontmelt reports. All models are:

- Immutable (frozen dataclasses)
- Serializable to plain dictionaries via ``to_dict()``
- Independent of fonttools implementation details

Key classes:
- PlatformEncoding: Platform and encoding of a name record
- MacintoshLanguage: Language ids of the Macintosh platform
- NameRecord / FontNames: Decoded name-table entries
- FontScriptInfo: Scripts and languages of a font
- FontMetricsModel: Em-normalized metrics
- GlyphDescriptor / VectorGlyphShape: Per-codepoint glyph data
- FontInfo / FontIntrospection: Per-face records
"""

from fontmelt.domain.encoding import (
    MacintoshEncoding,
    PlatformEncoding,
    PlatformId,
    UnicodeEncoding,
    WindowsEncoding,
    platform_encoding,
    windows_language,
)
from fontmelt.domain.font import (
    FontFlags,
    FontInfo,
    FontIntrospection,
    FontStyle,
    FontVariant,
)
from fontmelt.domain.glyph import (
    BoundingBox,
    GlyphDescriptor,
    PhantomPoints,
    Point,
    VectorGlyphShape,
)
from fontmelt.domain.language import MacintoshLanguage, macintosh_language
from fontmelt.domain.metrics import (
    FontMetricsModel,
    LineMetrics,
    RawMetrics,
    ScriptMetrics,
)
from fontmelt.domain.names import NAME_FIELDS, NAME_IDS, FontNames, NameRecord
from fontmelt.domain.scripts import FontScriptInfo, LayoutTable, ScriptRecord

__all__: list[str] = [
    # Enums
    "PlatformId",
    "UnicodeEncoding",
    "MacintoshEncoding",
    "WindowsEncoding",
    "MacintoshLanguage",
    "FontStyle",
    # Registry lookups
    "platform_encoding",
    "macintosh_language",
    "windows_language",
    # Core types
    "PlatformEncoding",
    "NameRecord",
    "FontNames",
    "NAME_FIELDS",
    "NAME_IDS",
    "ScriptRecord",
    "LayoutTable",
    "FontScriptInfo",
    "LineMetrics",
    "ScriptMetrics",
    "RawMetrics",
    "FontMetricsModel",
    "Point",
    "BoundingBox",
    "PhantomPoints",
    "GlyphDescriptor",
    "VectorGlyphShape",
    "FontVariant",
    "FontFlags",
    "FontInfo",
    "FontIntrospection",
]
