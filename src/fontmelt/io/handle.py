"""Font handle over caller-supplied bytes.

This module provides the FontHandle class, which opens one face of an
SFNT file or font collection with fonttools and exposes the table views the
introspection components read from.
"""

import struct
from collections.abc import Iterator
from io import BytesIO

import structlog
from fontTools.misc.roundTools import otRound
from fontTools.pens.basePen import AbstractPen
from fontTools.pens.boundsPen import ControlBoundsPen
from fontTools.ttLib import TTFont, TTLibError
from fontTools.ttLib.sfnt import readTTCHeader
from fontTools.ttLib.tables._n_a_m_e import NameRecord as RawNameRecord

from fontmelt.domain.glyph import BoundingBox, PhantomPoints, Point
from fontmelt.domain.scripts import LayoutTable, ScriptRecord

logger = structlog.get_logger(__name__)

# Tables without which a face is not usable.
REQUIRED_TABLES = ("head", "hhea", "maxp")

LAYOUT_TABLES = ("GSUB", "GPOS")


def collection_size(data: bytes) -> int:
    """Return the number of faces stored in ``data``.

    Non-collection files hold one face. A collection header that cannot be
    read also counts as one face rather than failing the request.
    """
    if data[:4] != b"ttcf":
        return 1
    try:
        header = readTTCHeader(BytesIO(data))
    except (TTLibError, AssertionError, struct.error) as e:
        logger.debug("Malformed collection header", error=str(e))
        return 1
    return header.numFonts


class FontHandle:
    """One open face of a font file.

    The handle is created per request and discarded afterwards. Nothing is
    cached between handles.

    Example:
        with FontHandle.open(data, 0) as handle:
            print(handle.units_per_em)
    """

    def __init__(self, font: TTFont, index: int = 0) -> None:
        """Wrap an already opened font.

        Args:
            font: fonttools font for a single face
            index: Index of the face within its file
        """
        self._font = font
        self._index = index
        self._cmap: dict[int, str] | None = None
        self._glyph_set = None

    @classmethod
    def open(cls, data: bytes, index: int = 0) -> "FontHandle | None":
        """Open face ``index`` of ``data``.

        Args:
            data: Raw SFNT or collection bytes
            index: Face index within the collection

        Returns:
            FontHandle, or None if the face cannot be parsed
        """
        if index < 0 or index >= collection_size(data):
            logger.debug("Face index out of range", index=index)
            return None

        try:
            font = TTFont(BytesIO(data), fontNumber=index)
            for tag in REQUIRED_TABLES:
                font[tag]
        except Exception as e:
            logger.debug(
                "Face could not be parsed",
                index=index,
                error=str(e),
                error_type=type(e).__name__,
            )
            return None

        return cls(font, index)

    @property
    def font(self) -> TTFont:
        """The underlying fonttools font."""
        return self._font

    @property
    def index(self) -> int:
        return self._index

    @property
    def units_per_em(self) -> int:
        """Return font's units per em.

        The units per em (UPM) defines the resolution of the font's
        coordinate system. Common values are 1000 or 2048.
        """
        return self._font["head"].unitsPerEm

    @property
    def glyph_count(self) -> int:
        return self._font["maxp"].numGlyphs

    def has_table(self, tag: str) -> bool:
        """True if the face carries the table ``tag``."""
        return tag in self._font

    # Name table

    def name_records(self) -> Iterator[RawNameRecord]:
        """Iterate raw name records in table order."""
        if "name" not in self._font:
            return
        yield from self._font["name"].names

    # Layout and metadata tables

    def layout_tables(self) -> list[LayoutTable | None]:
        """Return views of GSUB and GPOS, None for a missing table."""
        return [self._layout_table(tag) for tag in LAYOUT_TABLES]

    def _layout_table(self, tag: str) -> LayoutTable | None:
        if tag not in self._font:
            return None
        table = self._font[tag].table

        scripts = []
        script_list = getattr(table, "ScriptList", None)
        if script_list is not None:
            for record in script_list.ScriptRecord or []:
                script = record.Script
                languages = tuple(
                    lang.LangSysTag for lang in script.LangSysRecord or []
                )
                default = "dflt" if script.DefaultLangSys is not None else None
                scripts.append(ScriptRecord(record.ScriptTag, languages, default))

        features: tuple[str, ...] = ()
        feature_list = getattr(table, "FeatureList", None)
        if feature_list is not None:
            features = tuple(
                record.FeatureTag for record in feature_list.FeatureRecord or []
            )

        return LayoutTable(tag=tag, scripts=tuple(scripts), features=features)

    def meta_entry(self, tag: str) -> str | None:
        """Return a text entry of the ``meta`` table, if present."""
        if "meta" not in self._font:
            return None
        value = self._font["meta"].data.get(tag)
        if isinstance(value, bytes):
            try:
                return value.decode("utf-8")
            except UnicodeDecodeError:
                return None
        return value

    # Character map and glyph accessors

    @property
    def cmap(self) -> dict[int, str]:
        """Best Unicode cmap of the face (codepoint -> glyph name)."""
        if self._cmap is None:
            cmap = None
            if "cmap" in self._font:
                cmap = self._font.getBestCmap()
            self._cmap = cmap or {}
        return self._cmap

    def glyph_name(self, codepoint: int) -> str | None:
        """Map a codepoint to a glyph name, None when unmapped."""
        return self.cmap.get(codepoint)

    def glyph_id(self, glyph_name: str) -> int:
        return self._font.getGlyphID(glyph_name)

    def has_glyph_names(self) -> bool:
        """True if glyph names come from the font rather than being synthesized."""
        if "CFF " in self._font:
            return True
        if "post" in self._font:
            return self._font["post"].formatType in (1.0, 2.0)
        return False

    def horizontal_metrics(self, glyph_name: str) -> tuple[int, int] | None:
        """Return (advance width, left side bearing) from hmtx."""
        if "hmtx" not in self._font:
            return None
        return tuple(self._font["hmtx"][glyph_name])

    def vertical_metrics(self, glyph_name: str) -> tuple[int, int] | None:
        """Return (advance height, top side bearing) from vmtx."""
        if "vmtx" not in self._font:
            return None
        return tuple(self._font["vmtx"][glyph_name])

    def y_origin(self, glyph_name: str) -> int | None:
        """Return the vertical origin from VORG."""
        if "VORG" not in self._font:
            return None
        vorg = self._font["VORG"]
        return vorg.VOriginRecords.get(glyph_name, vorg.defaultVertOriginY)

    def bounding_box(self, glyph_name: str) -> BoundingBox | None:
        """Return the outline bounds, None for empty glyphs.

        TrueType glyphs report the bounds stored in their glyf header; CFF
        glyphs report the control bounds of their outline.
        """
        if "glyf" in self._font:
            glyf = self._font["glyf"]
            glyph = glyf[glyph_name]
            if glyph.numberOfContours == 0:
                return None
            if not hasattr(glyph, "xMin"):
                glyph.recalcBounds(glyf)
            return BoundingBox(glyph.xMin, glyph.yMin, glyph.xMax, glyph.yMax)

        pen = ControlBoundsPen(self.glyph_set)
        self.glyph_set[glyph_name].draw(pen)
        if pen.bounds is None:
            return None
        x_min, y_min, x_max, y_max = (otRound(v) for v in pen.bounds)
        return BoundingBox(x_min, y_min, x_max, y_max)

    def phantom_points(self, glyph_name: str) -> PhantomPoints | None:
        """Return the phantom points of a TrueType glyph."""
        if "glyf" not in self._font or "hmtx" not in self._font:
            return None
        glyph = self._font["glyf"][glyph_name]
        advance, lsb = self._font["hmtx"][glyph_name]
        left_x = getattr(glyph, "xMin", 0) - lsb
        right_x = left_x + advance

        top_y = bottom_y = 0
        vertical = self.vertical_metrics(glyph_name)
        if vertical is not None:
            v_advance, tsb = vertical
            top_y = tsb + getattr(glyph, "yMax", 0)
            bottom_y = top_y - v_advance

        return PhantomPoints(
            left=Point(float(left_x), 0.0),
            right=Point(float(right_x), 0.0),
            top=Point(0.0, float(top_y)),
            bottom=Point(0.0, float(bottom_y)),
        )

    def is_color_glyph(self, glyph_name: str) -> bool:
        """True if the COLR table has a base glyph record for the glyph."""
        if "COLR" not in self._font:
            return False
        colr = self._font["COLR"]
        if colr.version == 0:
            return glyph_name in colr.ColorLayers

        table = colr.table
        records = []
        if getattr(table, "BaseGlyphRecordArray", None) is not None:
            records.extend(table.BaseGlyphRecordArray.BaseGlyphRecord or [])
        if getattr(table, "BaseGlyphList", None) is not None:
            records.extend(table.BaseGlyphList.BaseGlyphPaintRecord or [])
        return any(record.BaseGlyph == glyph_name for record in records)

    # Outlines

    @property
    def glyph_set(self):
        """Glyph set used to draw outlines, components included."""
        if self._glyph_set is None:
            self._glyph_set = self._font.getGlyphSet()
        return self._glyph_set

    def draw_glyph(self, glyph_name: str, pen: AbstractPen) -> None:
        """Feed a glyph outline into a fonttools pen."""
        self.glyph_set[glyph_name].draw(pen)

    def close(self) -> None:
        """Close the font and free resources."""
        if self._font is not None:
            self._font.close()

    def __enter__(self) -> "FontHandle":
        """Context manager entry."""
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
