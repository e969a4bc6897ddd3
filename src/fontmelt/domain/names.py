"""Decoded name-table records.

A font may carry the same logical name several times, once per platform
and language, so every name field holds a list of records.
"""

from dataclasses import dataclass, field
from typing import Any

from fontmelt.domain.encoding import PlatformEncoding


@dataclass(frozen=True, slots=True)
class NameRecord:
    """A single decoded name-table entry.

    Attributes:
        name: Decoded text, or None when the bytes could not be decoded
        language: Language tag or display name, None when unknown
        platform_encoding: Platform and encoding the record was stored in
    """

    name: str | None
    language: str | None
    platform_encoding: PlatformEncoding

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "language": self.language,
            "platform_encoding": self.platform_encoding.to_dict(),
        }


# (field identifier, name id); id 15 is reserved by OpenType.
NAME_FIELDS: tuple[tuple[str, int], ...] = (
    ("copyright_notice", 0),
    ("family", 1),
    ("subfamily", 2),
    ("unique_id", 3),
    ("full_name", 4),
    ("version", 5),
    ("post_script_name", 6),
    ("trademark", 7),
    ("manufacturer", 8),
    ("designer", 9),
    ("description", 10),
    ("vendor_url", 11),
    ("designer_url", 12),
    ("license", 13),
    ("license_url", 14),
    ("typographic_family", 16),
    ("typographic_subfamily", 17),
    ("compatible_full", 18),
    ("sample_text", 19),
    ("post_script_cid", 20),
    ("wws_family", 21),
    ("wws_subfamily", 22),
    ("light_background_palette", 23),
    ("dark_background_palette", 24),
    ("variations_post_script_name_prefix", 25),
)

NAME_IDS: dict[str, int] = dict(NAME_FIELDS)


@dataclass(frozen=True)
class FontNames:
    """All well-known names of a font, keyed by field identifier.

    Every identifier of NAME_FIELDS is present; missing names map to an
    empty tuple.
    """

    fields: dict[str, tuple[NameRecord, ...]] = field(default_factory=dict)

    def __getitem__(self, key: str) -> tuple[NameRecord, ...]:
        if key not in NAME_IDS:
            raise KeyError(key)
        return self.fields.get(key, ())

    def first(self, key: str) -> str | None:
        """Return the first decoded text for a field, if any."""
        for record in self[key]:
            if record.name is not None:
                return record.name
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            key: [record.to_dict() for record in self[key]]
            for key, _ in NAME_FIELDS
        }
