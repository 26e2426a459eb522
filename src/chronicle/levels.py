from __future__ import annotations

from enum import IntEnum


class LogLevel(IntEnum):
    """Record severity, ordered from least to most severe.

    NONE sits above CRITICAL and marks a record (or a threshold) as disabled.
    """

    TRACE = 0
    DEBUG = 1
    INFORMATION = 2
    WARNING = 3
    ERROR = 4
    CRITICAL = 5
    NONE = 6

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: str | int | LogLevel) -> LogLevel:
        """Resolve a level from its name, a common alias, or its integer value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int):
            return cls(value)
        key = value.strip().upper()
        key = _ALIASES.get(key, key)
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown log level: {value!r}") from None


_ALIASES = {
    "INFO": "INFORMATION",
    "WARN": "WARNING",
    "FATAL": "CRITICAL",
}
