"""Name table resolution.

Turns raw name records into decoded NameRecords. Decoding runs in two
steps: a full-charset decode with the codec fonttools associates with the
record, then, for Macintosh/Roman records only, the fixed Mac OS Roman
table below.
"""

from fontTools.ttLib.tables._n_a_m_e import NameRecord as RawNameRecord

from fontmelt.domain.encoding import (
    PlatformEncoding,
    PlatformId,
    platform_encoding,
    windows_language,
)
from fontmelt.domain.language import macintosh_language
from fontmelt.domain.names import NAME_FIELDS, FontNames, NameRecord
from fontmelt.io.handle import FontHandle

# Mac OS Roman, bytes 0x80..0xFF. 0xCA is a no-break space and 0xF0 the
# Apple logo in the private use area.
MAC_ROMAN_HIGH = (
    "ÄÅÇÉÑÖÜáàâäãåçéèêëíìîïñóòôöõúùûü"
    "†°¢£§•¶ß®©™´¨≠ÆØ∞±≤≥¥µ∂∑∏π∫ªºΩæø"
    "¿¡¬√ƒ≈∆«»…\u00a0ÀÃÕŒœ–—“”‘’÷◊ÿŸ⁄€‹›ﬁﬂ"
    "‡·‚„‰ÂÊÁËÈÍÎÏÌÓÔ\uf8ffÒÚÛÙıˆ˜¯˘˙˚¸˝˛ˇ"
)


def decode_mac_roman(data: bytes) -> str:
    """Decode Mac OS Roman bytes.

    Bytes below 0x80 are ASCII; the rest go through MAC_ROMAN_HIGH.
    """
    return "".join(
        chr(byte) if byte < 0x80 else MAC_ROMAN_HIGH[byte - 0x80] for byte in data
    )


def _decode_full(record: RawNameRecord, encoding: PlatformEncoding) -> str | None:
    if encoding.is_macintosh_roman():
        return None
    if not record.isUnicode() and record.getEncoding(None) is None:
        return None
    try:
        return record.toUnicode(errors="strict")
    except (UnicodeDecodeError, LookupError):
        return None


def _language(record: RawNameRecord, encoding: PlatformEncoding) -> str | None:
    if encoding.platform in (PlatformId.WINDOWS, PlatformId.UNICODE):
        return windows_language(record.langID) or f"0x{record.langID:04X}"
    if encoding.platform is PlatformId.MACINTOSH:
        language = macintosh_language(record.langID)
        return language.display_name if language is not None else None
    return None


def resolve_record(record: RawNameRecord) -> NameRecord:
    """Decode a single raw name record.

    Args:
        record: fonttools name record

    Returns:
        NameRecord with the decoded text (None if undecodable), its language
        and its platform encoding
    """
    encoding = platform_encoding(record.platformID, record.platEncID)
    name = _decode_full(record, encoding)
    if name is None and encoding.is_macintosh_roman():
        name = decode_mac_roman(record.string)
    return NameRecord(
        name=name,
        language=_language(record, encoding),
        platform_encoding=encoding,
    )


def resolve(handle: FontHandle, name_id: int) -> list[NameRecord]:
    """Collect every record carrying ``name_id``, in name-table order."""
    return [
        resolve_record(record)
        for record in handle.name_records()
        if record.nameID == name_id
    ]


def resolve_names(handle: FontHandle) -> FontNames:
    """Resolve all well-known names of a face."""
    return FontNames(
        fields={key: tuple(resolve(handle, name_id)) for key, name_id in NAME_FIELDS}
    )
