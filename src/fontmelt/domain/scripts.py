"""Layout table views and aggregated script information."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class ScriptRecord:
    """A script entry of a GSUB or GPOS script list.

    Attributes:
        tag: OpenType script tag (e.g. "latn")
        languages: Language system tags declared for the script
        default_language: "dflt" when the script has a default language system
    """

    tag: str
    languages: tuple[str, ...] = ()
    default_language: str | None = None


@dataclass(frozen=True, slots=True)
class LayoutTable:
    """Script and feature tags of one layout table."""

    tag: str
    scripts: tuple[ScriptRecord, ...] = ()
    features: tuple[str, ...] = ()


@dataclass(frozen=True)
class FontScriptInfo:
    """Scripts and languages a font declares support for.

    Attributes:
        scripts: Script tags across GSUB and GPOS
        languages: Language system tags across every script of both tables
        designed: Languages the font was designed for ("dlng" meta entry)
        supported: Languages the font supports ("slng" meta entry)
    """

    scripts: frozenset[str] = field(default_factory=frozenset)
    languages: frozenset[str] = field(default_factory=frozenset)
    designed: frozenset[str] = field(default_factory=frozenset)
    supported: frozenset[str] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, Any]:
        return {
            "scripts": sorted(self.scripts),
            "languages": sorted(self.languages),
            "designed": sorted(self.designed),
            "supported": sorted(self.supported),
        }
