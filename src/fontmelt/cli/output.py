"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fontmelt.domain import FontIntrospection, GlyphDescriptor
from fontmelt.utils import IntrospectionStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]fontmelt[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_font_file(font_path: str, face_count: int) -> None:
    """Print the font file being read.

    Args:
        font_path: Path to the font file
        face_count: Number of faces in the file
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(font_path)
    plural = "face" if face_count == 1 else "faces"
    line.append(f" ({face_count} {plural})")
    console.print(line)


def _join(values: frozenset[str], limit: int = 12) -> str:
    ordered = sorted(values)
    if not ordered:
        return "-"
    text = ", ".join(ordered[:limit])
    if len(ordered) > limit:
        text += f" {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(ordered) - limit} more)"
    return text


def print_face(index: int, face: FontIntrospection | None) -> None:
    """Print the summary of one face.

    Args:
        index: Face index within the collection
        face: Introspection record, or None if the face could not be read
    """
    if face is None:
        console.print(f"\n[bold]Face {index}[/bold] [red]{SYM_ERR} unreadable[/red]")
        return

    info = face.info
    variant = info.variant
    title = Text(f"\nFace {index} ", style="bold")
    title.append(info.family or "(unnamed)")
    console.print(title)
    console.print(
        f"  {variant.style.value} {SYM_DOT} weight {variant.weight} "
        f"{SYM_DOT} stretch {variant.stretch:g}"
    )

    metrics = face.metrics
    console.print(
        f"  {metrics.units_per_em:g} UPM {SYM_DOT} ascender {metrics.ascender:.3f} "
        f"{SYM_DOT} descender {metrics.descender:.3f} {SYM_DOT} x-height {metrics.x_height:.3f}"
    )

    flags = [
        name
        for name, enabled in (
            ("monospace", info.flags.monospace),
            ("serif", info.flags.serif),
            ("variable", info.flags.variable),
            ("math", info.flags.math),
        )
        if enabled
    ]
    if flags:
        console.print(f"  {' '.join(flags)}")

    codepoints = sum(end - start + 1 for start, end in info.coverage)
    console.print(f"  {codepoints:,} codepoints in {len(info.coverage):,} ranges")
    console.print(f"  scripts    {_join(face.scripts.scripts)}")
    console.print(f"  languages  {_join(face.scripts.languages)}")
    console.print(f"  features   {_join(face.features)}")


def print_glyph_table(text: str, glyphs: list[GlyphDescriptor | None]) -> None:
    """Print glyph descriptors as a table.

    Args:
        text: Characters that were looked up
        glyphs: One descriptor (or None) per character
    """
    table = Table(box=None, pad_edge=False, header_style="bold")
    table.add_column("char")
    table.add_column("codepoint")
    table.add_column("id", justify="right")
    table.add_column("name")
    table.add_column("advance", justify="right")
    table.add_column("lsb", justify="right")
    table.add_column("bbox")
    table.add_column("color")

    for char, glyph in zip(text, glyphs, strict=True):
        codepoint = f"U+{ord(char):04X}"
        if glyph is None:
            table.add_row(char, codepoint, "[red]missing[/red]")
            continue
        bbox = glyph.bbox
        table.add_row(
            char,
            codepoint,
            str(glyph.id),
            glyph.name or "-",
            "-" if glyph.horizontal_advance is None else str(glyph.horizontal_advance),
            "-" if glyph.horizontal_side_bearing is None else str(glyph.horizontal_side_bearing),
            "-" if bbox is None else f"{bbox.x_min} {bbox.y_min} {bbox.x_max} {bbox.y_max}",
            SYM_OK if glyph.is_color else "",
        )

    console.print(table)


def print_shapes_written(written: int, missing: int, output_dir: str) -> None:
    """Print the result of writing SVG shapes.

    Args:
        written: Number of SVG files written
        missing: Number of characters without a shape
        output_dir: Directory the files were written to
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green]")
    line = Text("  ")
    line.append(output_dir, style="bold")
    console.print(line)
    missing_style = "red" if missing > 0 else "green"
    console.print(
        f"  {written} shapes {SYM_DOT} [{missing_style}]{missing} missing[/{missing_style}]"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_summary(stats: IntrospectionStats) -> None:
    """Print the summary of a collection introspection.

    Args:
        stats: Statistics of the run
    """
    time_str = _format_time(stats.duration_seconds)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")
    error_style = "red" if stats.error_count > 0 else "green"
    console.print(
        f"  {stats.faces_count} faces {SYM_DOT} {stats.faces_absent} unreadable {SYM_DOT} "
        f"[{error_style}]{stats.error_count} errors[/{error_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
