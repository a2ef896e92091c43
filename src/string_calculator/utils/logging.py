"""Structured logging configuration built on structlog."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, TextIO

import structlog

from string_calculator.utils.settings import get_settings

if TYPE_CHECKING:
    from string_calculator.utils.settings import LoggingSettings

_open_log_file: TextIO | None = None


def _build_renderer(log_format: str) -> Any:
    """Return the final structlog processor for the configured format."""
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=True)
    if log_format == "plain":
        return structlog.processors.KeyValueRenderer(
            key_order=["timestamp", "level", "event"],
        )
    return structlog.processors.JSONRenderer()


def _resolve_output(log_file_path: str | None) -> TextIO:
    """Open the configured log file, or fall back to stderr."""
    global _open_log_file  # noqa: PLW0603

    if _open_log_file is not None:
        _open_log_file.close()
        _open_log_file = None

    if not log_file_path:
        return sys.stderr

    path = Path(log_file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    _open_log_file = path.open("a", encoding="utf-8")
    return _open_log_file


def configure_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structlog according to the logging settings.

    Args:
        settings: Settings to apply. The global settings are used when omitted.

    """
    settings = settings or get_settings()
    level = logging.getLevelNamesMapping()[settings.log_level]

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _build_renderer(settings.log_format),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(
            file=_resolve_output(settings.log_file_path),
        ),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to the given component name and context."""
    if name is not None:
        initial_values.setdefault("component", name)
    return structlog.get_logger(**initial_values)


__all__ = ["configure_logging", "get_logger"]
