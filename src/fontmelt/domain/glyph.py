"""Glyph descriptors and vector shapes.

This module defines the per-codepoint glyph models: the metric descriptor
of a mapped glyph and the SVG shape produced from its outline.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in design units.

    Attributes:
        x: X coordinate in font units
        y: Y coordinate in font units
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y}


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned glyph bounds in font units."""

    x_min: int
    y_min: int
    x_max: int
    y_max: int

    @property
    def width(self) -> int:
        return self.x_max - self.x_min

    @property
    def height(self) -> int:
        return self.y_max - self.y_min

    def to_dict(self) -> dict[str, Any]:
        return {
            "x_min": self.x_min,
            "y_min": self.y_min,
            "x_max": self.x_max,
            "y_max": self.y_max,
        }


@dataclass(frozen=True, slots=True)
class PhantomPoints:
    """Metric anchors appended to a TrueType outline.

    Attributes:
        left: Origin of the horizontal advance
        right: End of the horizontal advance
        top: Origin of the vertical advance
        bottom: End of the vertical advance
    """

    left: Point
    right: Point
    top: Point
    bottom: Point

    def to_dict(self) -> dict[str, Any]:
        return {
            "left": self.left.to_dict(),
            "right": self.right.to_dict(),
            "top": self.top.to_dict(),
            "bottom": self.bottom.to_dict(),
        }


@dataclass(frozen=True, slots=True)
class GlyphDescriptor:
    """Metrics of the glyph a codepoint maps to.

    Attributes:
        id: Glyph id in the font
        name: Glyph name, when the font stores real names
        bbox: Outline bounds, None for glyphs without an outline
        phantom_points: TrueType phantom points
        y_origin: Vertical origin from the VORG table
        vertical_advance: Advance height from vmtx
        horizontal_advance: Advance width from hmtx
        vertical_side_bearing: Top side bearing from vmtx
        horizontal_side_bearing: Left side bearing from hmtx
        is_color: True if the COLR table defines the glyph
    """

    id: int
    name: str | None = None
    bbox: BoundingBox | None = None
    phantom_points: PhantomPoints | None = None
    y_origin: int | None = None
    vertical_advance: int | None = None
    horizontal_advance: int | None = None
    vertical_side_bearing: int | None = None
    horizontal_side_bearing: int | None = None
    is_color: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "bbox": self.bbox.to_dict() if self.bbox else None,
            "phantom_points": (
                self.phantom_points.to_dict() if self.phantom_points else None
            ),
            "y_origin": self.y_origin,
            "vertical_advance": self.vertical_advance,
            "horizontal_advance": self.horizontal_advance,
            "vertical_side_bearing": self.vertical_side_bearing,
            "horizontal_side_bearing": self.horizontal_side_bearing,
            "is_color": self.is_color,
        }


@dataclass(frozen=True, slots=True)
class VectorGlyphShape:
    """A glyph outline rendered as a standalone SVG document.

    Coordinates of the viewport are in points (scaled); ``path`` keeps the
    design-unit coordinates and is mapped through ``scale(s, -s)``.

    Attributes:
        path: SVG path data in outline visitation order
        svg: Complete SVG document
        x_origin: Scaled left edge of the outline bounds
        y_origin: Scaled, y-flipped top edge of the outline bounds
        width: Viewport width
        height: Viewport height
        scale: Factor applied to design units
    """

    path: str
    svg: str
    x_origin: float
    y_origin: float
    width: float
    height: float
    scale: float

    @property
    def view_box(self) -> tuple[float, float, float, float]:
        return (0.0, self.y_origin, self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "svg": self.svg,
            "metrics": {
                "x_origin": self.x_origin,
                "y_origin": self.y_origin,
                "width": self.width,
                "height": self.height,
                "scale": self.scale,
            },
        }
