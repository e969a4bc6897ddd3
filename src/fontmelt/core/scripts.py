"""Script, language and feature aggregation.

Scripts and languages are unioned across GSUB and GPOS, so the result does
not depend on which table is read first. Designed and supported languages
come from the ``dlng`` and ``slng`` entries of the ``meta`` table.
"""

from collections.abc import Iterable

from fontmelt.domain.scripts import FontScriptInfo, LayoutTable
from fontmelt.io.handle import FontHandle

DESIGNED_LANGUAGES_TAG = "dlng"
SUPPORTED_LANGUAGES_TAG = "slng"

META_SEPARATOR = ", "


def aggregate(
    layout_tables: Iterable[LayoutTable | None],
    designed: frozenset[str] = frozenset(),
    supported: frozenset[str] = frozenset(),
) -> FontScriptInfo:
    """Union script and language tags over the given layout tables.

    Args:
        layout_tables: GSUB/GPOS views; None stands for a missing table
        designed: Designed-language tags to carry along
        supported: Supported-language tags to carry along

    Returns:
        FontScriptInfo with duplicate-free tag sets
    """
    scripts: set[str] = set()
    languages: set[str] = set()
    for table in layout_tables:
        if table is None:
            continue
        for script in table.scripts:
            scripts.add(script.tag)
            languages.update(script.languages)
    return FontScriptInfo(
        scripts=frozenset(scripts),
        languages=frozenset(languages),
        designed=designed,
        supported=supported,
    )


def aggregate_features(layout_tables: Iterable[LayoutTable | None]) -> frozenset[str]:
    """Union feature tags over the given layout tables."""
    return frozenset(
        tag for table in layout_tables if table is not None for tag in table.features
    )


def parse_language_list(value: str | None) -> frozenset[str]:
    """Split a ``meta`` language list ("Latn, Cyrl") into tags."""
    if not value:
        return frozenset()
    return frozenset(tag for tag in value.split(META_SEPARATOR) if tag)


def font_scripts(handle: FontHandle) -> FontScriptInfo:
    """Read the script information of a face."""
    return aggregate(
        handle.layout_tables(),
        designed=parse_language_list(handle.meta_entry(DESIGNED_LANGUAGES_TAG)),
        supported=parse_language_list(handle.meta_entry(SUPPORTED_LANGUAGES_TAG)),
    )


def font_features(handle: FontHandle) -> frozenset[str]:
    """Read the feature tags of a face."""
    return aggregate_features(handle.layout_tables())
