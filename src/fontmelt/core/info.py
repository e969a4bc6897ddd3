"""Typesetter-facing font info: family, variant, coverage and flags."""

from collections.abc import Iterable

from fontmelt.core.names import resolve
from fontmelt.domain.encoding import PlatformId
from fontmelt.domain.font import FontFlags, FontInfo, FontStyle, FontVariant
from fontmelt.domain.names import NAME_IDS, NameRecord
from fontmelt.io.handle import FontHandle

# OS/2 fsSelection bits
FS_SELECTION_ITALIC = 1 << 0
FS_SELECTION_OBLIQUE = 1 << 9

# OS/2 usWidthClass 1..9 as a ratio of normal width
WIDTH_CLASS_STRETCH = {
    1: 0.5,
    2: 0.625,
    3: 0.75,
    4: 0.875,
    5: 1.0,
    6: 1.125,
    7: 1.25,
    8: 1.5,
    9: 2.0,
}

# PANOSE: latin text family with a serif style between cove and triangle
PANOSE_LATIN_TEXT = 2
PANOSE_SERIF_STYLES = range(2, 11)


def _preferred_name(records: Iterable[NameRecord]) -> str | None:
    candidates = [record for record in records if record.name]
    for record in candidates:
        is_english = (record.language or "").startswith("en")
        if record.platform_encoding.platform is PlatformId.WINDOWS and is_english:
            return record.name
    return candidates[0].name if candidates else None


def font_family(handle: FontHandle) -> str | None:
    """Typographic family if present, else the legacy family name."""
    for key in ("typographic_family", "family"):
        family = _preferred_name(resolve(handle, NAME_IDS[key]))
        if family:
            return family
    return None


def font_variant(handle: FontHandle) -> FontVariant:
    font = handle.font
    if "OS/2" not in font:
        return FontVariant()
    os2 = font["OS/2"]

    style = FontStyle.NORMAL
    if os2.fsSelection & FS_SELECTION_OBLIQUE:
        style = FontStyle.OBLIQUE
    elif os2.fsSelection & FS_SELECTION_ITALIC:
        style = FontStyle.ITALIC
    else:
        subfamily = _preferred_name(resolve(handle, NAME_IDS["subfamily"])) or ""
        subfamily = subfamily.lower()
        if "oblique" in subfamily:
            style = FontStyle.OBLIQUE
        elif "italic" in subfamily:
            style = FontStyle.ITALIC

    return FontVariant(
        style=style,
        weight=min(max(os2.usWeightClass, 100), 900),
        stretch=WIDTH_CLASS_STRETCH.get(os2.usWidthClass, 1.0),
    )


def coverage_ranges(codepoints: Iterable[int]) -> tuple[tuple[int, int], ...]:
    """Merge codepoints into sorted inclusive (start, end) runs."""
    runs: list[list[int]] = []
    for codepoint in sorted(set(codepoints)):
        if runs and runs[-1][1] + 1 == codepoint:
            runs[-1][1] = codepoint
        else:
            runs.append([codepoint, codepoint])
    return tuple((start, end) for start, end in runs)


def font_flags(handle: FontHandle) -> FontFlags:
    font = handle.font
    monospace = "post" in font and bool(font["post"].isFixedPitch)

    serif = False
    if "OS/2" in font:
        panose = font["OS/2"].panose
        serif = (
            panose.bFamilyType == PANOSE_LATIN_TEXT
            and panose.bSerifStyle in PANOSE_SERIF_STYLES
        )

    return FontFlags(
        monospace=monospace,
        serif=serif,
        variable=handle.has_table("fvar"),
        math=handle.has_table("MATH"),
    )


def font_info(handle: FontHandle) -> FontInfo:
    """Summarize a face for font selection."""
    return FontInfo(
        family=font_family(handle),
        variant=font_variant(handle),
        coverage=coverage_ranges(handle.cmap),
        flags=font_flags(handle),
    )
