"""Unit tests for the font I/O layer.

Tests for FontHandle and collection_size.
"""

from unittest.mock import MagicMock

import pytest

from fontmelt.domain import BoundingBox
from fontmelt.io import FontHandle, collection_size


class TestCollectionSize:
    """Tests for collection_size()."""

    def test_single_font(self, font_data: bytes) -> None:
        """Test a plain font counts as one face."""
        assert collection_size(font_data) == 1

    def test_collection(self, collection_data: bytes) -> None:
        """Test the declared face count of a collection."""
        assert collection_size(collection_data) == 2

    def test_truncated_header(self) -> None:
        """Test a collection header that cannot be read counts as one face."""
        assert collection_size(b"ttcf\x00") == 1

    def test_not_a_font(self) -> None:
        """Test arbitrary bytes count as one face."""
        assert collection_size(b"not a font") == 1
        assert collection_size(b"") == 1


class TestFontHandleOpen:
    """Tests for FontHandle.open()."""

    def test_open_font(self, font_data: bytes) -> None:
        """Test opening a plain font."""
        handle = FontHandle.open(font_data)
        assert handle is not None
        assert handle.index == 0
        assert handle.units_per_em == 1000
        assert handle.glyph_count == 4
        handle.close()

    def test_open_collection_faces(self, collection_data: bytes) -> None:
        """Test each face of a collection opens at its index."""
        with FontHandle.open(collection_data, 1) as handle:
            assert handle.index == 1
            assert handle.font["OS/2"].fsSelection & 0x01

    @pytest.mark.parametrize("index", [-1, 1, 5])
    def test_index_out_of_range(self, font_data: bytes, index: int) -> None:
        """Test indices outside the collection are absent."""
        assert FontHandle.open(font_data, index) is None

    def test_collection_index_out_of_range(self, collection_data: bytes) -> None:
        """Test an index equal to the face count is absent."""
        assert FontHandle.open(collection_data, 2) is None

    def test_garbage(self) -> None:
        """Test unparsable data is absent."""
        assert FontHandle.open(b"not a font at all") is None
        assert FontHandle.open(b"") is None

    def test_truncated_font(self, font_data: bytes) -> None:
        """Test a truncated font is absent rather than raising."""
        assert FontHandle.open(font_data[:64]) is None


class TestFontHandleTables:
    """Tests for FontHandle table views."""

    def test_name_records(self, font_data: bytes) -> None:
        """Test name records are exposed in table order."""
        with FontHandle.open(font_data) as handle:
            records = list(handle.name_records())
        assert records
        assert records[0].platformID == 1

    def test_layout_tables(self, layout_font_data: bytes) -> None:
        """Test GSUB and GPOS views."""
        with FontHandle.open(layout_font_data) as handle:
            gsub, gpos = handle.layout_tables()

        assert gsub.tag == "GSUB"
        assert gpos.tag == "GPOS"
        assert "liga" in gsub.features
        assert "kern" in gpos.features
        latn = next(script for script in gsub.scripts if script.tag == "latn")
        assert latn.languages == ("TRK ",)
        assert latn.default_language == "dflt"

    def test_missing_layout_tables(self, font_data: bytes) -> None:
        """Test missing GSUB and GPOS are reported as None."""
        with FontHandle.open(font_data) as handle:
            assert handle.layout_tables() == [None, None]

    def test_meta_entry(self, layout_font_data: bytes, font_data: bytes) -> None:
        """Test meta text entries."""
        with FontHandle.open(layout_font_data) as handle:
            assert handle.meta_entry("dlng") == "Latn, Cyrl"
            assert handle.meta_entry("xxxx") is None
        with FontHandle.open(font_data) as handle:
            assert handle.meta_entry("dlng") is None

    def test_cmap(self, font_data: bytes) -> None:
        """Test the best cmap and glyph lookups."""
        with FontHandle.open(font_data) as handle:
            assert handle.glyph_name(0x41) == "A"
            assert handle.glyph_name(0x5A) is None
            assert handle.glyph_id("B") == 2
            assert handle.has_glyph_names()

    def test_has_table(self, font_data: bytes, cff_font_data: bytes) -> None:
        """Test table presence for TrueType and CFF outlines."""
        with FontHandle.open(font_data) as handle:
            assert handle.has_table("glyf")
            assert not handle.has_table("CFF ")
        with FontHandle.open(cff_font_data) as handle:
            assert handle.has_table("CFF ")
            assert not handle.has_table("glyf")

    def test_cff_glyph_names(self, cff_font_data: bytes) -> None:
        """Test CFF fonts carry names even with a format 3 post table."""
        with FontHandle.open(cff_font_data) as handle:
            assert handle.font["post"].formatType == 3.0
            assert handle.has_glyph_names()
            assert handle.bounding_box("A") == BoundingBox(50, 0, 550, 700)

    def test_horizontal_metrics(self, font_data: bytes) -> None:
        """Test hmtx lookups."""
        with FontHandle.open(font_data) as handle:
            assert handle.horizontal_metrics("A") == (600, 50)
            assert handle.vertical_metrics("A") is None

    def test_draw_glyph(self, font_data: bytes) -> None:
        """Test outlines are fed to a pen."""
        pen = MagicMock()
        with FontHandle.open(font_data) as handle:
            handle.draw_glyph("A", pen)

        pen.moveTo.assert_called_once()
        pen.closePath.assert_called_once()

    def test_close(self, font_data: bytes) -> None:
        """Test the context manager closes the font."""
        handle = FontHandle.open(font_data)
        handle._font = MagicMock()
        with handle:
            pass
        handle._font.close.assert_called_once()
