"""CLI application entry point for fontmelt.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from fontmelt import __version__
from fontmelt.api import encode_payload
from fontmelt.cli.output import (
    print_error,
    print_face,
    print_font_file,
    print_glyph_table,
    print_header,
    print_shapes_written,
    print_step,
    print_summary,
)
from fontmelt.config import LoggingConfig, MeltSettings, ProcessingConfig, ShapeStyle
from fontmelt.core import FontIntrospector
from fontmelt.exceptions import FontFormatError, FontLoadError, FontMeltError, ShapeWriteError
from fontmelt.io import collection_size
from fontmelt.utils import configure_logging

# Leading tags of the containers fonttools can open
SFNT_TAGS = (b"\x00\x01\x00\x00", b"OTTO", b"true", b"typ1", b"ttcf", b"wOFF", b"wOF2")

# Create the Typer app
app = typer.Typer(
    name="fontmelt",
    help="Inspect OpenType fonts: names, scripts, metrics, glyphs and outlines.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"fontmelt v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Inspect OpenType fonts and font collections."""
    try:
        logging_config = LoggingConfig(log_file=log_file, log_level=log_level)
        configure_logging(
            log_file=logging_config.log_file,
            console_level=logging_config.log_level,
            file_level=logging_config.file_log_level,
        )
    except (AttributeError, ValidationError):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)
    ctx.obj = logging_config


def read_font(path: Path) -> bytes:
    """Read a font file, checking that it looks like an SFNT container.

    Raises:
        FontLoadError: If the file cannot be read
        FontFormatError: If the file is not a font
    """
    if not path.is_file():
        raise FontLoadError(str(path), "file does not exist or is not a file")
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FontLoadError(str(path), str(e)) from e
    if data[:4] not in SFNT_TAGS:
        raise FontFormatError(str(path), "not a TrueType/OpenType font or collection")
    return data


def _settings(ctx: typer.Context, **overrides: object) -> MeltSettings:
    logging_config = ctx.obj if isinstance(ctx.obj, LoggingConfig) else LoggingConfig()
    return MeltSettings(logging=logging_config, **overrides)


def _codepoints(text: str) -> list[int]:
    return [ord(char) for char in text]


@app.command()
def info(
    ctx: typer.Context,
    font: Annotated[
        Path,
        typer.Argument(help="Path to a font or font collection", show_default=False),
    ],
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the introspection records as JSON"),
    ] = False,
    workers: Annotated[
        int,
        typer.Option(
            "--workers",
            "-j",
            help="Worker processes for collections",
            min=1,
        ),
    ] = 1,
) -> None:
    """Introspect every face of a font file.

    Example:
        fontmelt info Inter.ttc
    """
    try:
        data = read_font(font)
        settings = _settings(ctx, processing=ProcessingConfig(max_workers=workers))
        introspector = FontIntrospector(settings)

        if as_json:
            typer.echo(encode_payload(introspector.collection_info(data)).decode("utf-8"))
            return

        print_header(__version__)
        print_step("Reading font")
        print_font_file(str(font), collection_size(data))

        print_step("Introspecting")
        faces = introspector.collection_info(data)
        for index, face in enumerate(faces):
            print_face(index, face)
        print_summary(introspector.stats)
    except FontMeltError as e:
        _fail(e)


@app.command()
def glyphs(
    ctx: typer.Context,
    font: Annotated[
        Path,
        typer.Argument(help="Path to a font or font collection", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Characters to look up", show_default=False),
    ],
    index: Annotated[
        int,
        typer.Option("--index", "-i", help="Face index within the collection", min=0),
    ] = 0,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the glyph descriptors as JSON"),
    ] = False,
) -> None:
    """Describe the glyphs of the characters of TEXT.

    Example:
        fontmelt glyphs Inter.ttf "Ag"
    """
    try:
        data = read_font(font)
        introspector = FontIntrospector(_settings(ctx))
        descriptors = introspector.glyph_infos(data, index, _codepoints(text))

        if as_json:
            typer.echo(encode_payload(descriptors).decode("utf-8"))
            return

        print_header(__version__)
        print_glyph_table(text, descriptors)
    except FontMeltError as e:
        _fail(e)


@app.command()
def shape(
    ctx: typer.Context,
    font: Annotated[
        Path,
        typer.Argument(help="Path to a font or font collection", show_default=False),
    ],
    text: Annotated[
        str,
        typer.Argument(help="Characters to vectorize", show_default=False),
    ],
    index: Annotated[
        int,
        typer.Option("--index", "-i", help="Face index within the collection", min=0),
    ] = 0,
    scaling: Annotated[
        float,
        typer.Option("--scaling", "-s", help="Multiplier applied to the outlines"),
    ] = 1.0,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Write one SVG per character here (default: print JSON)",
        ),
    ] = None,
) -> None:
    """Render the glyphs of the characters of TEXT as SVG.

    Example:
        fontmelt shape Inter.ttf "Ag" --output-dir shapes/
    """
    try:
        style = ShapeStyle(scaling=scaling)
    except ValidationError:
        print_error(f"Invalid scaling: {scaling}", details="Scaling must be positive.")
        raise typer.Exit(code=1)

    try:
        data = read_font(font)
        introspector = FontIntrospector(_settings(ctx, shape=style))
        codepoints = _codepoints(text)
        shapes = introspector.glyph_shapes(data, index, codepoints, style)

        if output_dir is None:
            typer.echo(encode_payload(shapes).decode("utf-8"))
            return

        written = 0
        for codepoint, glyph_shape in zip(codepoints, shapes, strict=True):
            if glyph_shape is None:
                continue
            write_svg(output_dir / f"u{codepoint:04X}.svg", glyph_shape.svg)
            written += 1
        print_shapes_written(written, len(shapes) - written, str(output_dir))
    except FontMeltError as e:
        _fail(e)


def write_svg(path: Path, svg: str) -> None:
    """Write an SVG document, creating parent directories.

    Raises:
        ShapeWriteError: If the file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(svg, encoding="utf-8")
    except OSError as e:
        raise ShapeWriteError(str(path), str(e)) from e


def _fail(error: FontMeltError) -> None:
    if isinstance(error, FontLoadError):
        print_error(f"Could not load font: {error.reason}")
    elif isinstance(error, FontFormatError):
        print_error(f"Not a font: {error.path}", details=error.details)
    elif isinstance(error, ShapeWriteError):
        print_error(f"Could not write shape: {error.reason}")
    else:
        print_error(str(error))
    raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
