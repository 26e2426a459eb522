"""
Standard I/O sink.
"""

from __future__ import annotations

import sys
from typing import Any, Literal, Optional

from chronicle.exceptions import SinkUnreachable
from chronicle.logging.formatters import ConsoleFormatter, orjson_dumps
from chronicle.record import LogEvent

from .base import Payload, Sink

StdioFormat = Literal["console", "json"]

# Fields shown in the console columns or too noisy for a terminal line.
_CONSOLE_HIDDEN = {
    "type_name",
    "product_company",
    "product_name",
    "product_version",
    "machine_name",
    "process_id",
    "process_name",
    "process_path",
    "thread_id",
    "thread_name",
    "origin_thread_id",
    "origin_thread_name",
    "created_at",
}


class StdioSink(Sink):
    """Writes one line per record to a stream.

    Args:
        fmt: Output format - "console" (aligned, colored on a tty) or "json"
        stream: Output stream (default: stdout)
        timeout: Seconds a single persist call may take.
    """

    name = "stdio"

    def __init__(self, fmt: StdioFormat = "console", stream: Any = None, *, timeout: Optional[float] = None):
        super().__init__(timeout=timeout)
        self._fmt = fmt
        self._stream = stream

    async def _write(self, record: LogEvent, payload: Payload) -> None:
        stream = self._stream or sys.stdout
        try:
            if self._fmt == "json":
                line = orjson_dumps(payload)
            else:
                use_color = bool(getattr(stream, "isatty", lambda: False)())
                line = ConsoleFormatter.format(self._console_event(payload), use_color=use_color)
            stream.write(line + "\n")
            stream.flush()
        except (OSError, ValueError) as exc:
            raise SinkUnreachable(f"stdio stream unavailable: {exc}", sink=self.name) from exc

    @staticmethod
    def _console_event(payload: Payload) -> dict[str, Any]:
        event = {k: v for k, v in payload.items() if k not in _CONSOLE_HIDDEN}
        event["timestamp"] = payload["created_at"]
        event["logger"] = f"{payload['product_name']}:{payload['thread_name']}"
        return event
