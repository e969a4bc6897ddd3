"""Outline to SVG path conversion.

PathStringPen is a fonttools segment pen: fonttools walks a glyph outline
and calls moveTo/lineTo/qCurveTo/curveTo/closePath on it, and the pen
appends the matching SVG path command. Commands are kept in exactly the
order the outline is visited.
"""

from fontTools.pens.basePen import BasePen
from picosvg.svg_meta import ntos

Coordinate = tuple[float, float]


class PathStringPen(BasePen):
    """A fonttools pen that accumulates SVG path data.

    Quadratic splines with several off-curve points and composite glyphs
    are decomposed by BasePen before they reach the segment callbacks, so
    only M, L, Q, C and Z commands are emitted.

    Args:
        glyphSet: Mapping used to resolve component references

    Example:
        pen = PathStringPen(font.getGlyphSet())
        glyph_set["A"].draw(pen)
        print(pen.path)
    """

    def __init__(self, glyphSet=None) -> None:
        super().__init__(glyphSet)
        self.commands: list[tuple[str, tuple[float, ...]]] = []

    def _emit(self, command: str, *points: Coordinate) -> None:
        self.commands.append((command, tuple(v for pt in points for v in pt)))

    def _moveTo(self, pt: Coordinate) -> None:
        self._emit("M", pt)

    def _lineTo(self, pt: Coordinate) -> None:
        self._emit("L", pt)

    def _qCurveToOne(self, pt1: Coordinate, pt2: Coordinate) -> None:
        self._emit("Q", pt1, pt2)

    def _curveToOne(self, pt1: Coordinate, pt2: Coordinate, pt3: Coordinate) -> None:
        self._emit("C", pt1, pt2, pt3)

    def _closePath(self) -> None:
        self._emit("Z")

    def _endPath(self) -> None:
        # Open contours are left without a closing command.
        pass

    def is_empty(self) -> bool:
        return not self.commands

    @property
    def path(self) -> str:
        """The accumulated SVG path data."""
        return " ".join(
            " ".join([command, *(ntos(v) for v in values)])
            for command, values in self.commands
        )
