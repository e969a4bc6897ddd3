"""Typographic metrics.

Unless stated otherwise quantities are fractions of the em; multiplying by
``units_per_em`` yields design units.
"""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class LineMetrics:
    """Position and thickness of a line decoration."""

    position: float
    thickness: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class ScriptMetrics:
    """Size and placement of subscript or superscript glyphs."""

    width: float
    height: float
    horizontal_offset: float
    vertical_offset: float

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class RawMetrics:
    """Em-relative metrics as read from a font's tables."""

    units_per_em: float
    ascender: float
    descender: float
    cap_height: float
    x_height: float
    line_gap: float
    underline: LineMetrics
    strikethrough: LineMetrics
    overline: LineMetrics
    italic_angle: float | None = None
    subscript: ScriptMetrics | None = None
    superscript: ScriptMetrics | None = None


@dataclass(frozen=True, slots=True)
class FontMetricsModel:
    """Normalized metrics of a font.

    Attributes:
        units_per_em: Size of the em in design units
        ascender: Ascender height (em)
        descender: Descender depth, negative below the baseline (em)
        cap_height: Capital letter height (em)
        x_height: Lowercase x height (em)
        line_gap: Recommended additional line spacing (em)
        italic_angle: Degrees, positive is counter-clockwise from vertical
        underline: Underline position and thickness (em)
        strikethrough: Strikethrough position and thickness (em)
        overline: Overline position and thickness (em)
        subscript: Subscript placement (em), if the font defines it
        superscript: Superscript placement (em), if the font defines it
    """

    units_per_em: float
    ascender: float
    descender: float
    cap_height: float
    x_height: float
    line_gap: float
    italic_angle: float | None
    underline: LineMetrics
    strikethrough: LineMetrics
    overline: LineMetrics
    subscript: ScriptMetrics | None = None
    superscript: ScriptMetrics | None = None

    def to_units(self, em: float) -> float:
        """Convert an em-relative value to design units."""
        return self.units_per_em * em

    @property
    def ascender_units(self) -> float:
        return self.to_units(self.ascender)

    @property
    def descender_units(self) -> float:
        return self.to_units(self.descender)

    @property
    def cap_height_units(self) -> float:
        return self.to_units(self.cap_height)

    @property
    def x_height_units(self) -> float:
        return self.to_units(self.x_height)

    @property
    def line_height(self) -> float:
        """Baseline-to-baseline distance (em): ascender - descender + line gap."""
        return self.ascender - self.descender + self.line_gap

    @property
    def line_height_units(self) -> float:
        return self.to_units(self.line_height)

    def to_dict(self) -> dict[str, Any]:
        return {
            "units_per_em": self.units_per_em,
            "ascender": self.ascender,
            "descender": self.descender,
            "cap_height": self.cap_height,
            "x_height": self.x_height,
            "line_gap": self.line_gap,
            "italic_angle": self.italic_angle,
            "underline": self.underline.to_dict(),
            "strikethrough": self.strikethrough.to_dict(),
            "overline": self.overline.to_dict(),
            "subscript": self.subscript.to_dict() if self.subscript else None,
            "superscript": self.superscript.to_dict() if self.superscript else None,
        }
