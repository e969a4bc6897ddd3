"""Tests for name table resolution."""

import pytest
from fontTools.ttLib.tables._n_a_m_e import makeName

from fontmelt.core.names import decode_mac_roman, resolve, resolve_names, resolve_record
from fontmelt.domain import NAME_IDS, FontNames, PlatformId
from fontmelt.io import FontHandle


class TestDecodeMacRoman:
    """Tests for the Mac OS Roman fallback table."""

    def test_ascii_passthrough(self) -> None:
        """Test bytes below 0x80 decode as ASCII."""
        assert decode_mac_roman(b"Melt Sans") == "Melt Sans"

    def test_high_bytes(self) -> None:
        """Test characters of the upper half."""
        assert decode_mac_roman(bytes([0x80])) == "Ä"
        assert decode_mac_roman(bytes([0x8E])) == "é"
        assert decode_mac_roman(bytes([0xC4])) == "ƒ"
        assert decode_mac_roman(bytes([0xDB])) == "€"
        assert decode_mac_roman(bytes([0xFF])) == "ˇ"

    def test_no_break_space_and_apple_logo(self) -> None:
        """Test the two special code points."""
        assert decode_mac_roman(bytes([0xCA])) == "\u00a0"
        assert decode_mac_roman(bytes([0xF0])) == "\uf8ff"

    def test_every_byte_decodes_to_one_character(self) -> None:
        """Test the table covers the whole byte range."""
        assert len(decode_mac_roman(bytes(range(256)))) == 256


class TestResolveRecord:
    """Tests for resolve_record()."""

    def test_windows_record(self) -> None:
        """Test a UTF-16 Windows record with an English LCID."""
        record = resolve_record(makeName("Melt Sans", 1, 3, 1, 0x0409))
        assert record.name == "Melt Sans"
        assert record.language == "en"
        assert record.platform_encoding.platform is PlatformId.WINDOWS

    def test_unknown_lcid_is_hex(self) -> None:
        """Test unknown Windows language ids fall back to a hex code."""
        record = resolve_record(makeName("Melt", 1, 3, 1, 0x9999))
        assert record.language == "0x9999"

    def test_macintosh_roman_record(self) -> None:
        """Test Macintosh Roman bytes decode through the fallback table."""
        record = resolve_record(makeName(b"Caf\x8e \xdb", 1, 1, 0, 0))
        assert record.name == "Café €"
        assert record.language == "English"

    def test_macintosh_language_display_name(self) -> None:
        """Test Macintosh records report the language display name."""
        record = resolve_record(makeName(b"Melt", 1, 1, 0, 19))
        assert record.language == "Chinese (traditional)"

    def test_macintosh_unknown_language(self) -> None:
        """Test unknown Macintosh language ids are absent."""
        record = resolve_record(makeName(b"Melt", 1, 1, 0, 200))
        assert record.language is None

    def test_undecodable_bytes(self) -> None:
        """Test invalid UTF-16 yields no text but keeps the record."""
        record = resolve_record(makeName(b"\x00A\x00", 1, 3, 1, 0x0409))
        assert record.name is None
        assert record.platform_encoding.to_indices() == (3, 1)

    def test_unknown_encoding(self) -> None:
        """Test records in an encoding without a codec have no text."""
        record = resolve_record(makeName(b"Melt", 1, 3, 99, 0x0409))
        assert record.name is None
        assert record.language == "en"
        assert record.platform_encoding.to_indices() == (3, 99)

    def test_unknown_platform(self) -> None:
        """Test records on unknown platforms have no text and no language."""
        record = resolve_record(makeName(b"\x00A", 1, 7, 0, 0))
        assert record.name is None
        assert record.language is None
        assert record.platform_encoding.platform is None


class TestResolve:
    """Tests for resolving names of a whole face."""

    def test_returns_all_records(self, font_data: bytes) -> None:
        """Test every matching record is returned, not only the first."""
        with FontHandle.open(font_data) as handle:
            records = resolve(handle, NAME_IDS["family"])

        platforms = {record.platform_encoding.platform for record in records}
        assert platforms == {PlatformId.MACINTOSH, PlatformId.WINDOWS}
        assert all(record.name == "Melt Sans" for record in records)

    def test_name_table_order(self, font_data: bytes) -> None:
        """Test records keep name table order (Macintosh before Windows)."""
        with FontHandle.open(font_data) as handle:
            records = resolve(handle, NAME_IDS["family"])
        assert [r.platform_encoding.platform_id for r in records] == [1, 3]

    def test_missing_name_is_empty(self, font_data: bytes) -> None:
        """Test a name id the font lacks resolves to an empty list."""
        with FontHandle.open(font_data) as handle:
            assert resolve(handle, NAME_IDS["license_url"]) == []

    def test_missing_family_is_empty(self, make_font_data) -> None:
        """Test a font without a family name reports an empty list."""
        data = make_font_data(mac_names=False)
        with FontHandle.open(data) as handle:
            handle.font["name"].removeNames(nameID=1)
            names = resolve_names(handle)
        assert names["family"] == ()
        assert names.first("family") is None

    def test_resolve_names_covers_all_fields(self, font_data: bytes) -> None:
        """Test every well-known field is present."""
        with FontHandle.open(font_data) as handle:
            names = resolve_names(handle)

        assert isinstance(names, FontNames)
        assert set(names.to_dict()) == set(NAME_IDS)
        assert names.first("subfamily") == "Regular"

    def test_unknown_field_raises(self, font_data: bytes) -> None:
        """Test lookups of unknown fields raise KeyError."""
        with FontHandle.open(font_data) as handle:
            names = resolve_names(handle)
        with pytest.raises(KeyError):
            names["reserved"]
