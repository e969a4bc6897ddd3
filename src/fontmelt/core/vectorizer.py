"""Glyph outline vectorization.

Converts the outline of the glyph a codepoint maps to into a standalone SVG
document. Font design space is y-up while SVG is y-down, so the path is
wrapped in a ``scale(s, -s)`` group that flips the y axis and converts
units in one step.
"""

from lxml import etree
from picosvg.svg_meta import ntos

from fontmelt.config.settings import ShapeStyle
from fontmelt.core.glyphs import describe
from fontmelt.core.pen import PathStringPen
from fontmelt.domain.glyph import BoundingBox, GlyphDescriptor, VectorGlyphShape
from fontmelt.io.handle import FontHandle

# Design units are treated as pixels; 0.75 pt per px.
UNIT_CONVERSION = 1 / 0.75

SVG_NS = "http://www.w3.org/2000/svg"
_SVG_TEMPLATE = f'<svg xmlns="{SVG_NS}" viewBox="TBD"/>'


def shape_scale(style: ShapeStyle) -> float:
    """Factor from design units to rendered units."""
    return UNIT_CONVERSION * style.scaling


def shape_width(glyph: GlyphDescriptor, bbox: BoundingBox, scale: float) -> float:
    """Viewport width: the advance, else the bounds padded by the side bearing."""
    if glyph.horizontal_advance is not None:
        width = glyph.horizontal_advance * scale
    else:
        side_bearing = glyph.horizontal_side_bearing or 0
        width = (bbox.width + 2 * side_bearing) * scale
    return max(width, 0.0)


def _svg_element(parent: etree.Element, tag: str) -> etree.Element:
    return etree.SubElement(parent, f"{{{SVG_NS}}}{tag}")


def render_svg(path: str, y_origin: float, width: float, height: float, scale: float) -> str:
    """Wrap path data in an SVG document whose group flips and scales it."""
    svg_root = etree.fromstring(_SVG_TEMPLATE)
    svg_root.attrib["viewBox"] = " ".join(ntos(v) for v in (0, y_origin, width, height))

    group = _svg_element(svg_root, "g")
    group.attrib["transform"] = f"scale({ntos(scale)}, {ntos(-scale)})"

    svg_path = _svg_element(group, "path")
    svg_path.attrib["d"] = path
    svg_path.attrib["fill"] = "black"

    return etree.tostring(svg_root, encoding="unicode", pretty_print=True)


def shape(
    handle: FontHandle,
    codepoint: int,
    style: ShapeStyle | None = None,
) -> VectorGlyphShape | None:
    """Vectorize the glyph for ``codepoint``.

    Args:
        handle: Open font handle
        codepoint: Unicode scalar value
        style: Rendering options (defaults to ShapeStyle())

    Returns:
        VectorGlyphShape, or None if the codepoint is unmapped or the glyph
        has no vector outline
    """
    style = style or ShapeStyle()
    glyph = describe(handle, codepoint)
    if glyph is None:
        return None

    glyph_name = handle.glyph_name(codepoint)
    pen = PathStringPen(handle.glyph_set)
    handle.draw_glyph(glyph_name, pen)
    if pen.is_empty():
        return None

    bbox = glyph.bbox or BoundingBox(0, 0, 0, 0)
    scale = shape_scale(style)
    width = shape_width(glyph, bbox, scale)
    height = bbox.height * scale
    y_origin = -bbox.y_max * scale
    path = pen.path

    return VectorGlyphShape(
        path=path,
        svg=render_svg(path, y_origin, width, height, scale),
        x_origin=bbox.x_min * scale,
        y_origin=y_origin,
        width=width,
        height=height,
        scale=scale,
    )
