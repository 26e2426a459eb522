"""
Sink abstraction.

`Sink.persist` is the single write contract: one best-effort attempt per call,
no retry, no buffering. Subclasses implement `_write`, which receives the
record already snapshotted as a dict, and translate their own transport
errors into `PersistError` subclasses. Anything they leave untranslated is
wrapped in `SinkFailure` here, so callers only ever see `PersistError`.

A `SinkTimeout` means the outcome is unknown: the caller stopped waiting,
but a write already handed to a worker thread or a client library may still
land. Such late outcomes are reported through diagnostics.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from chronicle.exceptions import PersistError, SinkFailure, SinkTimeout
from chronicle.logging import get_logger
from chronicle.record import LogEvent
from chronicle.serialization import record_to_dict

Payload = Dict[str, Any]

logger = get_logger("chronicle.sinks")


class Sink(ABC):
    """Abstract base class for record sinks.

    Args:
        timeout: Seconds a single persist call may take. None waits forever.
    """

    name = "sink"

    def __init__(self, *, timeout: Optional[float] = None):
        self._timeout = timeout

    @property
    def timeout(self) -> Optional[float]:
        return self._timeout

    async def persist(self, record: LogEvent) -> None:
        """Persist one record.

        Raises:
            SinkTimeout: The timeout elapsed first. The record may still be
                persisted afterwards; do not assume it was dropped.
            PersistError: Any other subclass means the record was not persisted.
        """
        payload = record_to_dict(record)
        try:
            if self._timeout is None:
                await self._write(record, payload)
            else:
                await asyncio.wait_for(self._write(record, payload), timeout=self._timeout)
        except PersistError:
            raise
        except asyncio.TimeoutError as exc:
            raise SinkTimeout(
                f"{self.name} sink did not persist within {self._timeout}s",
                sink=self.name,
                details={"timeout": self._timeout},
            ) from exc
        except Exception as exc:
            raise SinkFailure(
                f"{self.name} sink failed: {exc}",
                sink=self.name,
                details={"error": type(exc).__name__},
            ) from exc

    @abstractmethod
    async def _write(self, record: LogEvent, payload: Payload) -> None:
        """Write the snapshotted record to the destination."""
        ...

    async def _run_blocking(self, fn: Callable[..., Any], *args: Any) -> Any:
        """Run a blocking call in a worker thread that outlives cancellation.

        If the caller is cancelled (or times out) the thread keeps going, and
        its eventual outcome is logged instead of being lost.
        """
        task = asyncio.ensure_future(asyncio.to_thread(fn, *args))
        try:
            return await asyncio.shield(task)
        except asyncio.CancelledError:
            task.add_done_callback(self._report_late_outcome)
            raise

    def _report_late_outcome(self, task: "asyncio.Future[Any]") -> None:
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.warning("sink.late_write_failed", sink=self.name, error=str(exc), error_type=type(exc).__name__)
        else:
            logger.debug("sink.late_write_completed", sink=self.name)

    async def close(self) -> None:
        """Close the sink and release resources."""

    async def __aenter__(self) -> "Sink":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} timeout={self._timeout}>"
