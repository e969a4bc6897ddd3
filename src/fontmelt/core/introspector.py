"""Introspection orchestration.

This module assembles the per-font record from the individual components
and runs the batch operations. Every batch returns one entry per input
element; failures become None entries and never abort the batch.

Key components:
- introspect_font: Top-level picklable function introspecting one face
- FontIntrospector: Batch operations over collections and codepoint lists
"""

import time
import traceback
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor
from typing import TypeVar

import structlog

from fontmelt.config import MeltSettings, ShapeStyle
from fontmelt.core.glyphs import describe, is_scalar_value
from fontmelt.core.info import font_info
from fontmelt.core.metrics import font_metrics
from fontmelt.core.names import resolve_names
from fontmelt.core.scripts import font_features, font_scripts
from fontmelt.core.vectorizer import shape
from fontmelt.domain import FontIntrospection, GlyphDescriptor, VectorGlyphShape
from fontmelt.io import FontHandle, collection_size
from fontmelt.utils import IntrospectionLogger, IntrospectionStats

T = TypeVar("T")


def introspect_handle(handle: FontHandle) -> FontIntrospection:
    """Build the introspection record of an open face."""
    return FontIntrospection(
        names=resolve_names(handle),
        scripts=font_scripts(handle),
        features=font_features(handle),
        metrics=font_metrics(handle),
        info=font_info(handle),
    )


def introspect_font(data: bytes, index: int) -> FontIntrospection | None:
    """Introspect face ``index`` of ``data``.

    Top-level function so it can be shipped to worker processes.

    Returns:
        FontIntrospection, or None if the face cannot be opened
    """
    handle = FontHandle.open(data, index)
    if handle is None:
        return None
    with handle:
        return introspect_handle(handle)


class FontIntrospector:
    """Runs introspection requests.

    Example:
        introspector = FontIntrospector()
        records = introspector.collection_info(Path("font.ttc").read_bytes())
        shapes = introspector.glyph_shapes(data, 0, [ord("A")])
    """

    def __init__(
        self,
        settings: MeltSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the introspector.

        Args:
            settings: Application settings (defaults if None)
            logger: Logger to report to (the "fontmelt" logger if None)
        """
        self.settings = settings or MeltSettings()
        self.logger = logger or structlog.get_logger("fontmelt")
        self.introspection_logger = IntrospectionLogger(self.logger)

    @property
    def stats(self) -> IntrospectionStats:
        return self.introspection_logger.stats

    def _introspect_safely(self, data: bytes, index: int) -> FontIntrospection | None:
        try:
            return introspect_font(data, index)
        except Exception as e:
            self.introspection_logger.log_error(
                f"face {index}", e, traceback.format_exc()
            )
            return None

    def collection_info(
        self,
        data: bytes,
        max_workers: int | None = None,
    ) -> list[FontIntrospection | None]:
        """Introspect every face of a font file.

        Args:
            data: Raw font or collection bytes
            max_workers: Worker processes (settings default if None)

        Returns:
            One entry per face in collection order; None for faces that could
            not be opened
        """
        stats = self.stats
        stats.start_time = time.time()

        if max_workers is None:
            max_workers = self.settings.processing.max_workers

        count = collection_size(data)
        self.logger.info("Introspecting collection", faces=count, max_workers=max_workers)

        if max_workers > 1 and count > 1:
            results = self._collection_parallel(data, count, max_workers)
        else:
            results = [self._introspect_safely(data, index) for index in range(count)]

        for index, record in enumerate(results):
            if record is None:
                self.introspection_logger.log_face_absent(index)
            else:
                self.introspection_logger.log_face_complete(index, record.info.family)

        stats.end_time = time.time()
        return results

    def _collection_parallel(
        self, data: bytes, count: int, max_workers: int
    ) -> list[FontIntrospection | None]:
        """Introspect faces in worker processes, keeping collection order."""
        results: list[FontIntrospection | None] = []
        with ProcessPoolExecutor(max_workers=max_workers) as executor:
            futures = [
                executor.submit(introspect_font, data, index) for index in range(count)
            ]
            for index, future in enumerate(futures):
                try:
                    results.append(future.result())
                except Exception as e:
                    self.introspection_logger.log_error(
                        f"face {index}", e, traceback.format_exc()
                    )
                    results.append(None)
        return results

    def _per_codepoint(
        self,
        data: bytes,
        index: int,
        codepoints: Sequence[object],
        derive: Callable[[FontHandle, int], T | None],
    ) -> list[T | None]:
        self.introspection_logger.log_glyphs_requested(len(codepoints))

        handle = FontHandle.open(data, index)
        if handle is None:
            for codepoint in codepoints:
                self.introspection_logger.log_glyph_absent(index, codepoint, "face absent")
            return [None] * len(codepoints)

        results: list[T | None] = []
        with handle:
            for codepoint in codepoints:
                result = None
                if not is_scalar_value(codepoint):
                    reason = "not a character"
                else:
                    reason = "unmapped or no outline"
                    try:
                        result = derive(handle, codepoint)
                    except Exception as e:
                        reason = "error"
                        self.introspection_logger.log_error(
                            f"face {index} codepoint {codepoint}",
                            e,
                            traceback.format_exc(),
                        )
                if result is None:
                    self.introspection_logger.log_glyph_absent(index, codepoint, reason)
                results.append(result)
        return results

    def glyph_infos(
        self,
        data: bytes,
        index: int,
        codepoints: Sequence[object],
    ) -> list[GlyphDescriptor | None]:
        """Describe the glyphs of a list of codepoints.

        Returns:
            A list index-aligned with ``codepoints``
        """
        return self._per_codepoint(data, index, codepoints, describe)

    def glyph_shapes(
        self,
        data: bytes,
        index: int,
        codepoints: Sequence[object],
        style: ShapeStyle | None = None,
    ) -> list[VectorGlyphShape | None]:
        """Vectorize the glyphs of a list of codepoints.

        Returns:
            A list index-aligned with ``codepoints``
        """
        style = style or self.settings.shape
        return self._per_codepoint(
            data,
            index,
            codepoints,
            lambda handle, codepoint: shape(handle, codepoint, style),
        )
