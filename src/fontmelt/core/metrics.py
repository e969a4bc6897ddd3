"""Em-normalized font metrics.

derive_raw_metrics reads OS/2, hhea and post and converts design units to
fractions of the em, filling in typesetter defaults where a font omits a
value. normalize repackages the result into a FontMetricsModel.
"""

from fontmelt.domain.metrics import (
    FontMetricsModel,
    LineMetrics,
    RawMetrics,
    ScriptMetrics,
)
from fontmelt.io.handle import FontHandle

# Fallbacks when a font defines no decoration metrics (em).
DEFAULT_STRIKETHROUGH_POSITION = 0.25
DEFAULT_UNDERLINE_POSITION = -0.2
DEFAULT_LINE_THICKNESS = 0.06
# Overline sits this far above the cap height (em).
OVERLINE_GAP = 0.1


def _script_metrics(os2, prefix: str, upm: float, flip: bool) -> ScriptMetrics:
    vertical = getattr(os2, f"y{prefix}YOffset") / upm
    return ScriptMetrics(
        width=getattr(os2, f"y{prefix}XSize") / upm,
        height=getattr(os2, f"y{prefix}YSize") / upm,
        horizontal_offset=getattr(os2, f"y{prefix}XOffset") / upm,
        vertical_offset=-vertical if flip else vertical,
    )


def derive_raw_metrics(handle: FontHandle) -> RawMetrics:
    """Read a face's metrics as fractions of the em.

    Args:
        handle: Open font handle

    Returns:
        RawMetrics for the face
    """
    font = handle.font
    upm = float(handle.units_per_em)
    os2 = font["OS/2"] if "OS/2" in font else None
    post = font["post"] if "post" in font else None
    hhea = font["hhea"]

    if os2 is not None:
        ascender = os2.sTypoAscender / upm
        descender = os2.sTypoDescender / upm
        line_gap = os2.sTypoLineGap / upm
    else:
        ascender = hhea.ascent / upm
        descender = hhea.descent / upm
        line_gap = hhea.lineGap / upm

    cap_height = x_height = ascender
    if os2 is not None and os2.version >= 2:
        if os2.sCapHeight > 0:
            cap_height = os2.sCapHeight / upm
        if os2.sxHeight > 0:
            x_height = os2.sxHeight / upm

    strikeout = None
    if os2 is not None:
        strikeout = (os2.yStrikeoutPosition / upm, os2.yStrikeoutSize / upm)
    underline = None
    if post is not None:
        underline = (post.underlinePosition / upm, post.underlineThickness / upm)

    strikethrough_metrics = LineMetrics(
        position=strikeout[0] if strikeout else DEFAULT_STRIKETHROUGH_POSITION,
        thickness=(strikeout or underline or (None, DEFAULT_LINE_THICKNESS))[1],
    )
    underline_metrics = LineMetrics(
        position=underline[0] if underline else DEFAULT_UNDERLINE_POSITION,
        thickness=(underline or strikeout or (None, DEFAULT_LINE_THICKNESS))[1],
    )
    overline_metrics = LineMetrics(
        position=cap_height + OVERLINE_GAP,
        thickness=underline_metrics.thickness,
    )

    subscript = superscript = None
    if os2 is not None:
        subscript = _script_metrics(os2, "Subscript", upm, flip=True)
        superscript = _script_metrics(os2, "Superscript", upm, flip=False)

    return RawMetrics(
        units_per_em=upm,
        ascender=ascender,
        descender=descender,
        cap_height=cap_height,
        x_height=x_height,
        line_gap=line_gap,
        underline=underline_metrics,
        strikethrough=strikethrough_metrics,
        overline=overline_metrics,
        italic_angle=float(post.italicAngle) if post is not None else None,
        subscript=subscript,
        superscript=superscript,
    )


def normalize(raw: RawMetrics) -> FontMetricsModel:
    """Repackage raw em-relative metrics.

    Script metrics pass through unchanged when present.
    """
    return FontMetricsModel(
        units_per_em=raw.units_per_em,
        ascender=raw.ascender,
        descender=raw.descender,
        cap_height=raw.cap_height,
        x_height=raw.x_height,
        line_gap=raw.line_gap,
        italic_angle=raw.italic_angle,
        underline=raw.underline,
        strikethrough=raw.strikethrough,
        overline=raw.overline,
        subscript=raw.subscript,
        superscript=raw.superscript,
    )


def font_metrics(handle: FontHandle) -> FontMetricsModel:
    """Derive the normalized metrics of a face."""
    return normalize(derive_raw_metrics(handle))
