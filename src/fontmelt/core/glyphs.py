"""Glyph descriptors for codepoints."""

from fontmelt.domain.glyph import GlyphDescriptor
from fontmelt.io.handle import FontHandle

MAX_CODEPOINT = 0x10FFFF
SURROGATES = range(0xD800, 0xE000)


def is_scalar_value(codepoint: object) -> bool:
    """True if ``codepoint`` is a Unicode scalar value (a valid character)."""
    return (
        isinstance(codepoint, int)
        and not isinstance(codepoint, bool)
        and 0 <= codepoint <= MAX_CODEPOINT
        and codepoint not in SURROGATES
    )


def describe_glyph(handle: FontHandle, glyph_name: str) -> GlyphDescriptor:
    """Collect the metrics of a glyph."""
    horizontal = handle.horizontal_metrics(glyph_name)
    vertical = handle.vertical_metrics(glyph_name)
    return GlyphDescriptor(
        id=handle.glyph_id(glyph_name),
        name=glyph_name if handle.has_glyph_names() else None,
        bbox=handle.bounding_box(glyph_name),
        phantom_points=handle.phantom_points(glyph_name),
        y_origin=handle.y_origin(glyph_name),
        vertical_advance=vertical[0] if vertical else None,
        horizontal_advance=horizontal[0] if horizontal else None,
        vertical_side_bearing=vertical[1] if vertical else None,
        horizontal_side_bearing=horizontal[1] if horizontal else None,
        is_color=handle.is_color_glyph(glyph_name),
    )


def describe(handle: FontHandle, codepoint: int) -> GlyphDescriptor | None:
    """Describe the glyph ``codepoint`` maps to.

    Args:
        handle: Open font handle
        codepoint: Unicode scalar value

    Returns:
        GlyphDescriptor, or None if the codepoint is not a valid character or
        the font has no glyph for it
    """
    if not is_scalar_value(codepoint):
        return None
    glyph_name = handle.glyph_name(codepoint)
    if glyph_name is None:
        return None
    return describe_glyph(handle, glyph_name)
