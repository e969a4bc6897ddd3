"""Per-font introspection records."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from fontmelt.domain.metrics import FontMetricsModel
from fontmelt.domain.names import FontNames
from fontmelt.domain.scripts import FontScriptInfo


class FontStyle(str, Enum):
    """Slant of a font face."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


@dataclass(frozen=True, slots=True)
class FontVariant:
    """Style, weight and stretch of a face.

    Attributes:
        style: Upright, italic or oblique
        weight: OS/2 weight class clamped to 100..900
        stretch: Width as a ratio of normal width (0.5..2.0)
    """

    style: FontStyle = FontStyle.NORMAL
    weight: int = 400
    stretch: float = 1.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "style": self.style.value,
            "weight": self.weight,
            "stretch": self.stretch,
        }


@dataclass(frozen=True, slots=True)
class FontFlags:
    """Boolean properties a typesetter selects fonts by."""

    monospace: bool = False
    serif: bool = False
    variable: bool = False
    math: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_monospace": self.monospace,
            "is_serif": self.serif,
            "is_variable": self.variable,
            "has_math_table": self.math,
        }


@dataclass(frozen=True)
class FontInfo:
    """Typesetter-facing summary of a face.

    Attributes:
        family: Family name used for font selection
        variant: Style, weight and stretch
        coverage: Inclusive (start, end) codepoint ranges mapped by the cmap
        flags: Monospace/serif/variable/math properties
    """

    family: str | None
    variant: FontVariant = field(default_factory=FontVariant)
    coverage: tuple[tuple[int, int], ...] = ()
    flags: FontFlags = field(default_factory=FontFlags)

    def covers(self, codepoint: int) -> bool:
        return any(start <= codepoint <= end for start, end in self.coverage)

    def to_dict(self) -> dict[str, Any]:
        return {
            "family": self.family,
            "variant": self.variant.to_dict(),
            "coverage": [list(run) for run in self.coverage],
            **self.flags.to_dict(),
        }


@dataclass(frozen=True)
class FontIntrospection:
    """Everything fontmelt reports about one face."""

    names: FontNames
    scripts: FontScriptInfo
    features: frozenset[str]
    metrics: FontMetricsModel
    info: FontInfo

    def to_dict(self) -> dict[str, Any]:
        return {
            "properties": {
                "names": self.names.to_dict(),
                "scripts": self.scripts.to_dict(),
                "features": sorted(self.features),
            },
            "metrics": self.metrics.to_dict(),
            "info": self.info.to_dict(),
        }
