"""
In-process sinks: a no-op sink and a recording test double.
"""

from __future__ import annotations

import threading
from typing import List, Optional

from chronicle.exceptions import PersistError
from chronicle.record import LogEvent

from .base import Payload, Sink


class NullSink(Sink):
    """Accepts every record and discards it."""

    name = "null"

    async def _write(self, record: LogEvent, payload: Payload) -> None:
        return None


class MemorySink(Sink):
    """Keeps serialized records in memory. Intended as a test double.

    Args:
        fail_with: When set, every persist call raises this error instead of storing.
            The same instance is raised each time, with its traceback reset.
        timeout: Seconds a single persist call may take.
    """

    name = "memory"

    def __init__(self, *, fail_with: Optional[PersistError] = None, timeout: Optional[float] = None):
        super().__init__(timeout=timeout)
        self._fail_with = fail_with
        self._lock = threading.Lock()
        self._payloads: List[Payload] = []

    @property
    def payloads(self) -> List[Payload]:
        with self._lock:
            return list(self._payloads)

    async def _write(self, record: LogEvent, payload: Payload) -> None:
        if self._fail_with is not None:
            raise self._fail_with.with_traceback(None)
        with self._lock:
            self._payloads.append(payload)

    def clear(self) -> None:
        with self._lock:
            self._payloads.clear()
