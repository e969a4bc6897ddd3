"""Public operations of fontmelt.

Two surfaces are provided over the same introspection engine:

- Python API: ``fonts_collection_info``, ``glyphs_infos`` and
  ``glyph_shapes`` return domain objects.
- Payload API: the ``*_json`` variants take raw font bytes plus a JSON
  request and return UTF-8 JSON, for callers living on the other side of a
  process or language boundary.

Example:
    data = Path("Inter.ttc").read_bytes()
    faces = fonts_collection_info(data)
    payload = glyph_shapes_json(data, b'{"index": 0, "codepoints": [65]}')
"""

import json
from collections.abc import Sequence
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from fontmelt.config import MeltSettings, ShapeStyle
from fontmelt.core.introspector import FontIntrospector
from fontmelt.domain import FontIntrospection, GlyphDescriptor, VectorGlyphShape
from fontmelt.exceptions import RequestError

logger = structlog.get_logger(__name__)

EMPTY_PAYLOAD = b"[]"


class GlyphRequest(BaseModel):
    """A batch of codepoints to look up in one face."""

    model_config = ConfigDict(frozen=True)

    index: StrictInt = Field(ge=0, description="Face index within the collection")
    codepoints: list[StrictInt] = Field(description="Codepoints, in output order")
    style: ShapeStyle = Field(default_factory=ShapeStyle)


def decode_request(request: bytes | str) -> GlyphRequest:
    """Validate a JSON glyph request.

    Args:
        request: JSON document ``{"index", "codepoints", "style"?}``

    Returns:
        Validated GlyphRequest

    Raises:
        RequestError: If the payload is not valid JSON or fails validation
    """
    try:
        return GlyphRequest.model_validate_json(request)
    except ValidationError as e:
        raise RequestError(f"{e.error_count()} validation error(s)") from e


def encode_payload(entries: Sequence[Any | None]) -> bytes:
    """Serialize a list of domain objects (or None) to JSON bytes."""
    return json.dumps(
        [entry.to_dict() if entry is not None else None for entry in entries],
        ensure_ascii=False,
    ).encode("utf-8")


def fonts_collection_info(
    data: bytes,
    settings: MeltSettings | None = None,
) -> list[FontIntrospection | None]:
    """Introspect every face of a font file or collection.

    Args:
        data: Raw font bytes
        settings: Application settings (defaults if None)

    Returns:
        One entry per face; None where a face could not be parsed
    """
    return FontIntrospector(settings).collection_info(data)


def glyphs_infos(
    data: bytes,
    index: int,
    codepoints: Sequence[int],
) -> list[GlyphDescriptor | None]:
    """Describe the glyphs of ``codepoints`` in face ``index``.

    Returns:
        A list of the same length as ``codepoints``
    """
    return FontIntrospector().glyph_infos(data, index, codepoints)


def glyph_shapes(
    data: bytes,
    index: int,
    codepoints: Sequence[int],
    style: ShapeStyle | None = None,
) -> list[VectorGlyphShape | None]:
    """Vectorize the glyphs of ``codepoints`` in face ``index``.

    Returns:
        A list of the same length as ``codepoints``
    """
    return FontIntrospector().glyph_shapes(data, index, codepoints, style)


def fonts_collection_info_json(data: bytes) -> bytes:
    """JSON variant of :func:`fonts_collection_info`."""
    return encode_payload(fonts_collection_info(data))


def glyphs_infos_json(data: bytes, request: bytes | str) -> bytes:
    """JSON variant of :func:`glyphs_infos`.

    A malformed request yields an empty JSON array.
    """
    try:
        parsed = decode_request(request)
    except RequestError as e:
        logger.warning("Rejected glyph info request", reason=e.reason)
        return EMPTY_PAYLOAD
    return encode_payload(glyphs_infos(data, parsed.index, parsed.codepoints))


def glyph_shapes_json(data: bytes, request: bytes | str) -> bytes:
    """JSON variant of :func:`glyph_shapes`.

    A malformed request yields an empty JSON array.
    """
    try:
        parsed = decode_request(request)
    except RequestError as e:
        logger.warning("Rejected glyph shape request", reason=e.reason)
        return EMPTY_PAYLOAD
    return encode_payload(
        glyph_shapes(data, parsed.index, parsed.codepoints, parsed.style)
    )
