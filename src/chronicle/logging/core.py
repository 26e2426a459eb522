"""
Diagnostic logging for chronicle itself.

These events describe chronicle's own lifecycle (sink creation, identity
overrides). They are written straight to a stream and never routed through a
record sink, so a failing sink can not trigger more logging about itself.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

import structlog
from structlog.typing import EventDict, WrappedLogger

from .formatters import ConsoleFormatter, orjson_dumps

_configured = False


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance."""
    _ensure_configured()
    return structlog.get_logger(_name=name or "chronicle")


# =============================================================================
# Structlog Processors
# =============================================================================


def add_timestamp(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add ISO 8601 timestamp to log event."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_logger_name(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Add logger name to log event."""
    event_dict["logger"] = event_dict.pop("_name", "chronicle")
    return event_dict


def rename_event_key(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Rename 'event' to 'message' so diagnostics share the record vocabulary."""
    if "event" in event_dict:
        event_dict["message"] = event_dict.pop("event")
    return event_dict


class StreamRenderer:
    """Final processor: renders the event dict and returns the line to print."""

    def __init__(self, fmt: str = "console", stream: TextIO | None = None):
        self._fmt = fmt
        self._stream = stream

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        if self._fmt == "json":
            return orjson_dumps(event_dict)
        stream = self._stream or sys.stderr
        use_color = bool(getattr(stream, "isatty", lambda: False)())
        return ConsoleFormatter.format(event_dict, use_color=use_color)


# =============================================================================
# Configuration Logic
# =============================================================================


def configure_logging(
    *,
    level: str = "WARNING",
    fmt: str = "console",
    stream: TextIO | None = None,
    console_options: dict[str, Any] | None = None,
) -> None:
    """
    Configure chronicle's diagnostic logging.

    Args:
        level: Minimum level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        fmt: Output format (console, json)
        stream: Destination stream (default: stderr)
        console_options: Keyword arguments for `ConsoleFormatter.configure`
    """
    global _configured

    log_format = "json" if fmt.lower() == "json" else "console"
    if console_options:
        ConsoleFormatter.configure(**console_options)

    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            add_timestamp,
            add_logger_name,
            rename_event_key,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            StreamRenderer(log_format, stream),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level.upper(), logging.WARNING)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
    _configured = True


def configure_from_settings() -> None:
    """Configure diagnostics from `settings.logging`."""
    from chronicle.config import settings

    log_settings = settings.logging
    configure_logging(
        level=log_settings.level.value,
        fmt=log_settings.format.value,
        console_options={
            "timestamp_format": log_settings.console_timestamp_format,
            "level_width": log_settings.console_level_width,
            "logger_width": log_settings.console_logger_width,
            "separator": log_settings.console_separator,
        },
    )


def _ensure_configured() -> None:
    # Leave a host application's own structlog setup alone.
    if not _configured and not structlog.is_configured():
        configure_from_settings()
