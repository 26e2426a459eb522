"""
Console formatting and JSON helpers shared by diagnostics and the stdio sink.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Mapping

import orjson

COLORS = {
    "reset": "\033[0m",
    "dim": "\033[2m",
    "timestamp": "\033[90m",
    "logger": "\033[35m",
    "key": "\033[34m",
}


_JSON_OPTIONS = orjson.OPT_UTC_Z | orjson.OPT_NAIVE_UTC | orjson.OPT_NON_STR_KEYS


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


def orjson_dumps(v: Any, *, default: Any = str) -> str:
    """Fast JSON serialization using orjson."""
    return orjson.dumps(v, default=default, option=_JSON_OPTIONS).decode()


class ConsoleFormatter:
    """Renders an event mapping as one aligned, human-readable line.

    Columns: timestamp | LEVEL | logger | message key=value ...
    """

    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        "TRACE": "\x1b[2m",
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "INFORMATION": "\x1b[32m",
        "WARNING": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRITICAL": "\x1b[1;31m",
    }

    EXCLUDED_KEYS = {"level", "message", "event", "logger", "timestamp", "_name"}
    TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
    TIMESTAMP_WIDTH = 19
    LEVEL_WIDTH = 11
    LOGGER_WIDTH = 32
    SEPARATOR = " | "

    @classmethod
    def configure(
        cls,
        *,
        timestamp_format: str | None = None,
        level_width: int | None = None,
        logger_width: int | None = None,
        separator: str | None = None,
    ) -> None:
        """Configure alignment and rendering parameters."""
        if timestamp_format:
            cls.TIMESTAMP_FORMAT = timestamp_format
            cls.TIMESTAMP_WIDTH = len(datetime.now().strftime(timestamp_format))
        if level_width:
            cls.LEVEL_WIDTH = level_width
        if logger_width:
            cls.LOGGER_WIDTH = logger_width
        if separator is not None:
            cls.SEPARATOR = separator

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if width <= 0:
            return text
        if len(text) > width:
            if width <= 3:
                text = text[-width:]
            else:
                text = "..." + text[-(width - 3) :]
        return f"{text:>{width}}"

    @classmethod
    def _format_timestamp(cls, raw_timestamp: Any) -> str:
        if isinstance(raw_timestamp, datetime):
            dt = raw_timestamp
        elif raw_timestamp:
            try:
                dt = datetime.fromisoformat(str(raw_timestamp).replace("Z", "+00:00"))
            except ValueError:
                return datetime.now().strftime(cls.TIMESTAMP_FORMAT)
        else:
            return datetime.now().strftime(cls.TIMESTAMP_FORMAT)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone().strftime(cls.TIMESTAMP_FORMAT)

    @classmethod
    def _colorize_level(cls, text: str, level_upper: str, use_color: bool) -> str:
        color = cls._LEVEL_COLORS.get(level_upper)
        if not use_color or not color:
            return text
        return f"{color}{text}{cls._RESET}"

    @staticmethod
    def _maybe_color(text: str, color: str, use_color: bool) -> str:
        if not use_color:
            return text
        return colorize(text, color)

    @classmethod
    def format(cls, event: Mapping[str, Any], *, use_color: bool = True) -> str:
        """Format an event mapping into an aligned string."""
        level_upper = str(event.get("level", "info")).upper()
        message = str(event.get("message", event.get("event", "")))
        logger_name = str(event.get("logger", "root"))

        extras = []
        for k, v in event.items():
            if k in cls.EXCLUDED_KEYS or v is None or v == [] or v == {}:
                continue
            value_text = v if isinstance(v, str) else orjson_dumps(v)
            extras.append(f"{cls._maybe_color(k, 'key', use_color)}={cls._maybe_color(value_text, 'dim', use_color)}")
        if extras:
            message = f"{message} " + " ".join(extras)

        return cls.SEPARATOR.join(
            [
                cls._maybe_color(
                    cls._fit_right(cls._format_timestamp(event.get("timestamp")), cls.TIMESTAMP_WIDTH),
                    "timestamp",
                    use_color,
                ),
                cls._colorize_level(cls._fit_right(level_upper, cls.LEVEL_WIDTH), level_upper, use_color),
                cls._maybe_color(cls._fit_right(logger_name, cls.LOGGER_WIDTH), "logger", use_color),
                message,
            ]
        )
