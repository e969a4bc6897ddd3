"""Logging utilities for fontmelt."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by the last configure_logging() call
_installed_handlers: list[logging.Handler] = []


@dataclass
class IntrospectionStats:
    """Statistics from an introspection run."""

    faces_count: int = 0
    faces_absent: int = 0
    glyphs_count: int = 0
    glyphs_absent: int = 0
    error_count: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate processing duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("fontmelt")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class IntrospectionLogger:
    """Logger for tracking per-face and per-glyph outcomes."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = IntrospectionStats()

    def log_face_complete(self, index: int, family: str | None) -> None:
        """Log a successfully introspected face."""
        self._logger.debug("Face introspected", index=index, family=family)
        self._stats.faces_count += 1

    def log_face_absent(self, index: int) -> None:
        """Log a face that could not be opened."""
        self._logger.info("Face absent", index=index)
        self._stats.faces_count += 1
        self._stats.faces_absent += 1

    def log_glyph_absent(self, index: int, codepoint: object, reason: str) -> None:
        """Log a codepoint without a glyph entry."""
        self._logger.debug(
            "Glyph absent", index=index, codepoint=codepoint, reason=reason
        )
        self._stats.glyphs_absent += 1

    def log_glyphs_requested(self, count: int) -> None:
        self._stats.glyphs_count += count

    def log_error(
        self,
        subject: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log an unexpected failure that was turned into an absent entry."""
        self._logger.warning(
            "Introspection failed",
            subject=subject,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((subject, str(error)))

    @property
    def stats(self) -> IntrospectionStats:
        """Get current statistics."""
        return self._stats
