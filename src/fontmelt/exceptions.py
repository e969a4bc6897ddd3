"""Exception hierarchy for fontmelt.

Font content never raises out of the library operations: unreadable faces
and unmapped glyphs become ``None`` entries. These exceptions belong to the
request boundary and the CLI.
"""


class FontMeltError(Exception):
    """Base exception for all fontmelt errors."""

    pass


class FontError(FontMeltError):
    """Errors related to reading font files."""

    pass


class FontLoadError(FontError):
    """Error reading a font file from disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load font '{path}': {reason}")


class FontFormatError(FontError):
    """Data is not an SFNT font or font collection."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid font format '{path}': {details}")


class RequestError(FontMeltError):
    """A request payload could not be decoded."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Malformed request: {reason}")


class ShapeWriteError(FontMeltError):
    """Error writing a glyph shape to disk."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write shape '{path}': {reason}")
