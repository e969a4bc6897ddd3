"""fontmelt - Structured introspection of OpenType fonts.

fontmelt reads SFNT fonts and font collections and reports, per face, the
resolved name table, supported scripts, languages and features, normalized
metrics and typesetter font info. On demand it describes the glyphs of a
list of codepoints and renders their outlines as SVG.

Example:
    $ fontmelt info Inter.ttc --json
    $ fontmelt shape Inter.ttc "Ag" --output-dir shapes/
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

from fontmelt.api import (
    fonts_collection_info,
    fonts_collection_info_json,
    glyph_shapes,
    glyph_shapes_json,
    glyphs_infos,
    glyphs_infos_json,
)

__all__ = [
    "__author__",
    "__version__",
    "fonts_collection_info",
    "fonts_collection_info_json",
    "glyph_shapes",
    "glyph_shapes_json",
    "glyphs_infos",
    "glyphs_infos_json",
]
