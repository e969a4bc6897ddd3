"""Font I/O layer for fontmelt.

This module opens fonts from caller-supplied bytes using fonttools. It
provides a clean abstraction layer between fonttools tables and the
introspection components.

Key responsibilities:
- Open one face of a font file or collection
- Count the faces of a collection
- Expose name records, layout tables, outlines and glyph metrics

Key classes:
- FontHandle: One open face
"""

from fontmelt.io.handle import FontHandle, collection_size

__all__ = [
    "FontHandle",
    "collection_size",
]
