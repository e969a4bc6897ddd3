"""Platform and encoding identifiers of the OpenType name table.

See https://learn.microsoft.com/en-us/typography/opentype/spec/name#platform-ids

Every numeric (platform id, encoding id) pair maps to exactly one
PlatformEncoding. Unknown codes are kept verbatim instead of failing, so
``platform_encoding(p, e).to_indices() == (p, e)`` for every pair.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from fontTools.ttLib.tables._n_a_m_e import _WINDOWS_LANGUAGES


class PlatformId(IntEnum):
    """OpenType platform identifiers."""

    UNICODE = 0
    MACINTOSH = 1
    ISO = 2
    WINDOWS = 3
    CUSTOM = 4

    @property
    def label(self) -> str:
        return _PLATFORM_LABELS[self]


class UnicodeEncoding(IntEnum):
    """Encodings of the Unicode platform."""

    UNICODE_1_0 = 0
    UNICODE_1_1 = 1
    ISO_IEC_10646 = 2
    UNICODE_BMP = 3
    UNICODE_FULL = 4

    @property
    def label(self) -> str:
        return _UNICODE_LABELS[self]


class MacintoshEncoding(IntEnum):
    """Script manager codes of the Macintosh platform."""

    ROMAN = 0
    JAPANESE = 1
    CHINESE_TRADITIONAL = 2
    KOREAN = 3
    ARABIC = 4
    HEBREW = 5
    GREEK = 6
    RUSSIAN = 7
    RSYMBOL = 8
    DEVANAGARI = 9
    GURMUKHI = 10
    GUJARATI = 11
    ODIA = 12
    BANGLA = 13
    TAMIL = 14
    TELUGU = 15
    KANNADA = 16
    MALAYALAM = 17
    SINHALESE = 18
    BURMESE = 19
    KHMER = 20
    THAI = 21
    LAOTIAN = 22
    GEORGIAN = 23
    ARMENIAN = 24
    CHINESE_SIMPLIFIED = 25
    TIBETAN = 26
    MONGOLIAN = 27
    GEEZ = 28
    SLAVIC = 29
    VIETNAMESE = 30
    SINDHI = 31
    UNINTERPRETED = 32

    @property
    def label(self) -> str:
        return "".join(part.capitalize() for part in self.name.split("_"))


class WindowsEncoding(IntEnum):
    """Encodings of the Windows platform."""

    SYMBOL = 0
    UNICODE_BMP = 1
    SHIFT_JIS = 2
    PRC = 3
    BIG5 = 4
    WANSUNG = 5
    JOHAB = 6
    UNICODE_FULL = 10

    @property
    def label(self) -> str:
        return _WINDOWS_LABELS[self]


SubEncoding = UnicodeEncoding | MacintoshEncoding | WindowsEncoding

_PLATFORM_LABELS = {
    PlatformId.UNICODE: "Unicode",
    PlatformId.MACINTOSH: "Macintosh",
    PlatformId.ISO: "Iso",
    PlatformId.WINDOWS: "Windows",
    PlatformId.CUSTOM: "Custom",
}

_UNICODE_LABELS = {
    UnicodeEncoding.UNICODE_1_0: "Unicode 1.0",
    UnicodeEncoding.UNICODE_1_1: "Unicode 1.1",
    UnicodeEncoding.ISO_IEC_10646: "ISO/IEC 10646",
    UnicodeEncoding.UNICODE_BMP: "Unicode BMP",
    UnicodeEncoding.UNICODE_FULL: "Unicode Full",
}

_WINDOWS_LABELS = {
    WindowsEncoding.SYMBOL: "Symbol",
    WindowsEncoding.UNICODE_BMP: "Unicode BMP",
    WindowsEncoding.SHIFT_JIS: "ShiftJIS",
    WindowsEncoding.PRC: "PRC",
    WindowsEncoding.BIG5: "Big5",
    WindowsEncoding.WANSUNG: "Wansung",
    WindowsEncoding.JOHAB: "Johab",
    WindowsEncoding.UNICODE_FULL: "Unicode Full",
}

_PLATFORMS = {member.value: member for member in PlatformId}

# Platforms whose encoding ids form a closed enumeration.
_SUB_ENCODINGS: dict[PlatformId, dict[int, SubEncoding]] = {
    PlatformId.UNICODE: {member.value: member for member in UnicodeEncoding},
    PlatformId.MACINTOSH: {member.value: member for member in MacintoshEncoding},
    PlatformId.WINDOWS: {member.value: member for member in WindowsEncoding},
}


@dataclass(frozen=True, slots=True)
class PlatformEncoding:
    """A name record's platform and encoding.

    Attributes:
        platform_id: Raw platform id from the record
        encoding_id: Raw encoding id from the record
        platform: Known platform, or None for ids outside 0..4
        encoding: Known sub-encoding for the Unicode, Macintosh and Windows
            platforms; None for Iso/Custom/unknown platforms and for
            unknown sub-encoding codes
    """

    platform_id: int
    encoding_id: int
    platform: PlatformId | None
    encoding: SubEncoding | None

    @property
    def is_other(self) -> bool:
        """True when the platform has sub-encodings but this code is unknown."""
        return self.platform in _SUB_ENCODINGS and self.encoding is None

    def is_macintosh_roman(self) -> bool:
        return (
            self.platform is PlatformId.MACINTOSH
            and self.encoding is MacintoshEncoding.ROMAN
        )

    def to_indices(self) -> tuple[int, int]:
        return (self.platform_id, self.encoding_id)

    @property
    def platform_label(self) -> str:
        if self.platform is None:
            return f"Unknown({self.platform_id})"
        return self.platform.label

    @property
    def encoding_label(self) -> str:
        if self.encoding is not None:
            return self.encoding.label
        if self.is_other:
            return f"Other({self.encoding_id:02x})"
        return str(self.encoding_id)

    def __str__(self) -> str:
        return f"{self.platform_label}({self.encoding_label})"

    def to_dict(self) -> dict[str, Any]:
        return {
            "platform": self.platform_label,
            "encoding": self.encoding_label,
            "platform_id": self.platform_id,
            "encoding_id": self.encoding_id,
        }


def platform_encoding(platform_id: int, encoding_id: int) -> PlatformEncoding:
    """Resolve a numeric (platform id, encoding id) pair.

    Never fails: unknown platforms and unknown sub-encodings are represented
    with ``None`` members while the raw ids are preserved.
    """
    platform = _PLATFORMS.get(platform_id)
    encoding = None
    if platform in _SUB_ENCODINGS:
        encoding = _SUB_ENCODINGS[platform].get(encoding_id)
    return PlatformEncoding(
        platform_id=platform_id,
        encoding_id=encoding_id,
        platform=platform,
        encoding=encoding,
    )


def windows_language(language_id: int) -> str | None:
    """Return the BCP-47 tag for a Windows LCID, or None if unknown."""
    return _WINDOWS_LANGUAGES.get(language_id)
