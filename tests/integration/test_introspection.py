"""End-to-end introspection of fonts and collections built in memory."""

import json

import pytest

from fontmelt import fonts_collection_info_json, glyph_shapes_json, glyphs_infos_json

FEATURES = """
languagesystem DFLT dflt;
languagesystem latn dflt;
languagesystem cyrl dflt;
languagesystem cyrl SRB;

feature liga {
    sub A B by A;
} liga;

feature kern {
    pos A B -40;
} kern;
"""


@pytest.fixture
def rich_collection(make_collection_data) -> bytes:
    """A collection whose faces differ in layout, style and vertical data."""
    return make_collection_data(
        {
            "family": "Melt Sans",
            "style": "Regular",
            "features": FEATURES,
            "meta": {"dlng": "Latn, Cyrl", "slng": "Latn, Cyrl"},
        },
        {
            "family": "Melt Sans",
            "style": "Bold Italic",
            "os2": {"fsSelection": 0x01, "usWeightClass": 700},
            "vertical": True,
            "color": True,
        },
    )


class TestCollectionIntrospection:
    """Introspect every face of a collection through the payload API."""

    def test_faces(self, rich_collection: bytes) -> None:
        payload = json.loads(fonts_collection_info_json(rich_collection))

        assert len(payload) == 2
        regular, bold_italic = payload

        assert regular["properties"]["scripts"] == {
            "scripts": ["DFLT", "cyrl", "latn"],
            "languages": ["SRB "],
            "designed": ["Cyrl", "Latn"],
            "supported": ["Cyrl", "Latn"],
        }
        assert regular["properties"]["features"] == ["kern", "liga"]
        assert regular["info"]["variant"]["style"] == "normal"

        assert bold_italic["properties"]["scripts"]["scripts"] == []
        assert bold_italic["info"]["variant"] == {
            "style": "italic",
            "weight": 700,
            "stretch": 1.0,
        }

    def test_metrics(self, rich_collection: bytes) -> None:
        payload = json.loads(fonts_collection_info_json(rich_collection))
        metrics = payload[0]["metrics"]

        assert metrics["units_per_em"] == 1000
        assert metrics["ascender"] == pytest.approx(0.8)
        assert metrics["underline"]["position"] == pytest.approx(-0.1)
        assert metrics["subscript"]["vertical_offset"] == pytest.approx(-0.075)

    def test_names_per_platform(self, rich_collection: bytes) -> None:
        payload = json.loads(fonts_collection_info_json(rich_collection))
        subfamily = payload[1]["properties"]["names"]["subfamily"]

        assert [record["platform_encoding"]["platform"] for record in subfamily] == [
            "Macintosh",
            "Windows",
        ]
        assert [record["language"] for record in subfamily] == ["English", "en"]
        assert {record["name"] for record in subfamily} == {"Bold Italic"}

    def test_glyph_requests_per_face(self, rich_collection: bytes) -> None:
        request = b'{"index": 1, "codepoints": [65, 32, 9731]}'
        infos = json.loads(glyphs_infos_json(rich_collection, request))
        shapes = json.loads(glyph_shapes_json(rich_collection, request))

        assert len(infos) == len(shapes) == 3
        assert infos[0]["is_color"] is True
        assert infos[0]["y_origin"] == 900
        assert infos[1]["bbox"] is None
        assert infos[2] is None

        assert shapes[0]["metrics"]["height"] == pytest.approx(700 / 0.75)
        assert shapes[1] is None
        assert shapes[2] is None

    def test_face_out_of_range(self, rich_collection: bytes) -> None:
        request = b'{"index": 2, "codepoints": [65, 66]}'
        assert json.loads(glyph_shapes_json(rich_collection, request)) == [None, None]
