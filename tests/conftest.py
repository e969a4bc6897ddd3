"""Shared fixtures: small fonts built in memory with fonttools."""

from io import BytesIO

import pytest
from fontTools.feaLib.builder import addOpenTypeFeaturesFromString
from fontTools.fontBuilder import FontBuilder
from fontTools.pens.t2CharStringPen import T2CharStringPen
from fontTools.pens.ttGlyphPen import TTGlyphPen
from fontTools.ttLib import TTCollection, TTFont, newTable
from fontTools.ttLib.tables.otTables import PaintFormat

UPM = 1000

GLYPH_ORDER = [".notdef", "A", "B", "space"]
CMAP = {0x41: "A", 0x42: "B", 0x20: "space"}
# (advance width, left side bearing)
HORIZONTAL_METRICS = {
    ".notdef": (500, 0),
    "A": (600, 50),
    "B": (600, 100),
    "space": (250, 0),
}

FEATURES = """
languagesystem DFLT dflt;
languagesystem latn dflt;
languagesystem latn TRK;

feature liga {
    sub A B by A;
} liga;

feature kern {
    pos A B -50;
} kern;
"""


def _triangle() -> object:
    # Bounds 50,0 .. 550,700
    pen = TTGlyphPen(None)
    pen.moveTo((50, 0))
    pen.lineTo((550, 0))
    pen.lineTo((300, 700))
    pen.closePath()
    return pen.glyph()


def _bowl() -> object:
    # A quadratic arc over a flat base, bounds 100,0 .. 500,400
    pen = TTGlyphPen(None)
    pen.moveTo((100, 0))
    pen.lineTo((500, 0))
    pen.qCurveTo((500, 400), (100, 400))
    pen.closePath()
    return pen.glyph()


def _empty() -> object:
    return TTGlyphPen(None).glyph()


def font_bytes(font: TTFont) -> bytes:
    buffer = BytesIO()
    font.save(buffer)
    return buffer.getvalue()


def build_font(
    family: str = "Melt Sans",
    style: str = "Regular",
    *,
    names: dict | None = None,
    mac_names: bool = True,
    os2: dict | None = None,
    include_os2: bool = True,
    post: dict | None = None,
    keep_glyph_names: bool = True,
    features: str | None = None,
    meta: dict[str, str] | None = None,
    vertical: bool = False,
    color: bool = False,
    color_version: int = 0,
) -> TTFont:
    """Build a TrueType font with glyphs .notdef, A (triangle), B (bowl), space."""
    fb = FontBuilder(UPM, isTTF=True)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CMAP)
    fb.setupGlyf(
        {".notdef": _empty(), "A": _triangle(), "B": _bowl(), "space": _empty()}
    )
    fb.setupHorizontalMetrics(HORIZONTAL_METRICS)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable(
        {"familyName": family, "styleName": style, **(names or {})},
        mac=mac_names,
    )
    if include_os2:
        fb.setupOS2(
            **{
                "sTypoAscender": 800,
                "sTypoDescender": -200,
                "sTypoLineGap": 100,
                "usWinAscent": 800,
                "usWinDescent": 200,
                "sCapHeight": 700,
                "sxHeight": 500,
                "yStrikeoutPosition": 300,
                "yStrikeoutSize": 50,
                "ySubscriptXSize": 650,
                "ySubscriptYSize": 600,
                "ySubscriptXOffset": 0,
                "ySubscriptYOffset": 75,
                "ySuperscriptXSize": 650,
                "ySuperscriptYSize": 600,
                "ySuperscriptXOffset": 0,
                "ySuperscriptYOffset": 350,
                **(os2 or {}),
            }
        )
    fb.setupPost(
        keepGlyphNames=keep_glyph_names,
        **{"underlinePosition": -100, "underlineThickness": 40, **(post or {})},
    )

    if features is not None:
        addOpenTypeFeaturesFromString(fb.font, features)

    if meta is not None:
        table = newTable("meta")
        table.data = dict(meta)
        fb.font["meta"] = table

    if vertical:
        fb.setupVerticalHeader(ascent=880, descent=-120)
        fb.setupVerticalMetrics(
            {
                ".notdef": (1000, 0),
                "A": (1000, 100),
                "B": (1000, 400),
                "space": (1000, 0),
            }
        )
        vorg = newTable("VORG")
        vorg.majorVersion = 1
        vorg.minorVersion = 0
        vorg.defaultVertOriginY = 880
        vorg.VOriginRecords = {"A": 900}
        fb.font["VORG"] = vorg

    if color:
        fb.setupCPAL([[(1.0, 0.0, 0.0, 1.0)]])
        if color_version == 0:
            fb.setupCOLR({"A": [("A", 0)]}, version=0)
        else:
            fb.setupCOLR(
                {
                    "A": {
                        "Format": PaintFormat.PaintGlyph,
                        "Paint": {
                            "Format": PaintFormat.PaintSolid,
                            "PaletteIndex": 0,
                            "Alpha": 1.0,
                        },
                        "Glyph": "A",
                    }
                },
                version=1,
            )

    return fb.font


def build_cff_font(family: str = "Melt Sans", style: str = "Regular") -> TTFont:
    """Build a CFF-flavored font whose A is a cubic arch, bounds 50,0 .. 550,700."""
    fb = FontBuilder(UPM, isTTF=False)
    fb.setupGlyphOrder(GLYPH_ORDER)
    fb.setupCharacterMap(CMAP)

    char_strings = {}
    for glyph_name in GLYPH_ORDER:
        pen = T2CharStringPen(HORIZONTAL_METRICS[glyph_name][0], None)
        if glyph_name == "A":
            pen.moveTo((50, 0))
            pen.lineTo((550, 0))
            pen.curveTo((550, 300), (400, 700), (300, 700))
            pen.closePath()
        char_strings[glyph_name] = pen.getCharString()

    ps_name = f"{family}-{style}".replace(" ", "")
    fb.setupCFF(ps_name, {"FullName": f"{family} {style}"}, char_strings, {})
    fb.setupHorizontalMetrics(HORIZONTAL_METRICS)
    fb.setupHorizontalHeader(ascent=800, descent=-200)
    fb.setupNameTable({"familyName": family, "styleName": style})
    fb.setupOS2(
        sTypoAscender=800,
        sTypoDescender=-200,
        usWinAscent=800,
        usWinDescent=200,
        sCapHeight=700,
        sxHeight=500,
    )
    fb.setupPost()
    return fb.font


def build_collection(*fonts: TTFont) -> bytes:
    """Pack fonts into a TrueType collection."""
    collection = TTCollection()
    for font in fonts:
        collection.fonts.append(TTFont(BytesIO(font_bytes(font))))
    buffer = BytesIO()
    collection.save(buffer)
    return buffer.getvalue()


@pytest.fixture
def font_data() -> bytes:
    """A plain TrueType font."""
    return font_bytes(build_font())


@pytest.fixture
def layout_font_data() -> bytes:
    """A font with GSUB/GPOS features and meta language lists."""
    return font_bytes(
        build_font(
            features=FEATURES,
            meta={"dlng": "Latn, Cyrl", "slng": "Latn, Cyrl, Grek"},
        )
    )


@pytest.fixture
def vertical_font_data() -> bytes:
    """A font with vmtx, VORG and a COLR v0 glyph."""
    return font_bytes(build_font(vertical=True, color=True))


@pytest.fixture
def collection_data() -> bytes:
    """A two-face collection: Melt Sans Regular and Melt Serif Italic."""
    return build_collection(
        build_font("Melt Sans", "Regular"),
        build_font("Melt Serif", "Italic", os2={"fsSelection": 0x01}),
    )


@pytest.fixture
def make_font_data():
    """Factory building font bytes from build_font keyword arguments."""

    def make(**kwargs) -> bytes:
        return font_bytes(build_font(**kwargs))

    return make


@pytest.fixture
def make_collection_data():
    """Factory building collection bytes, one build_font kwargs dict per face."""

    def make(*faces: dict) -> bytes:
        return build_collection(*(build_font(**face) for face in faces))

    return make


@pytest.fixture
def cff_font_data() -> bytes:
    """A CFF-flavored font with post format 3 and cubic outlines."""
    return font_bytes(build_cff_font())


@pytest.fixture
def colr_v1_font_data() -> bytes:
    """A font whose A is painted through a COLR v1 paint graph."""
    return font_bytes(build_font(color=True, color_version=1))
