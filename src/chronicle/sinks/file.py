"""
Local file sink with size-based rotation (JSON lines).
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import IO, Optional

from chronicle.exceptions import SinkUnauthorized, SinkUnreachable
from chronicle.logging import get_logger
from chronicle.record import LogEvent
from chronicle.serialization import dumps

from .base import Payload, Sink

logger = get_logger("chronicle.sinks.file")


class FileSink(Sink):
    """Appends one JSON object per line, rotating at `max_bytes`.

    Each line is written with a single call under a lock in a worker thread.
    A cancelled or timed-out persist lets that thread finish, so the file
    never holds a partial line and the record may still be appended.
    """

    name = "file"

    def __init__(
        self,
        path: str | Path,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        *,
        timeout: Optional[float] = None,
    ):
        super().__init__(timeout=timeout)
        self._path = Path(path)
        self._max_bytes = max_bytes
        self._backup_count = backup_count
        self._lock = threading.Lock()
        self._file: Optional[IO[bytes]] = None
        logger.debug("sink.created", sink=self.name, path=str(self._path))

    @property
    def path(self) -> Path:
        return self._path

    async def _write(self, record: LogEvent, payload: Payload) -> None:
        line = dumps(payload) + b"\n"
        await self._run_blocking(self._append, line)

    def _append(self, line: bytes) -> None:
        with self._lock:
            try:
                if self._file is None:
                    self._path.parent.mkdir(parents=True, exist_ok=True)
                    self._file = open(self._path, "ab")
                self._file.write(line)
                self._file.flush()
                self._maybe_rotate()
            except PermissionError as exc:
                raise SinkUnauthorized(f"cannot write {self._path}: {exc}", sink=self.name) from exc
            except OSError as exc:
                raise SinkUnreachable(f"cannot write {self._path}: {exc}", sink=self.name) from exc

    def _maybe_rotate(self) -> None:
        if self._path.stat().st_size <= self._max_bytes:
            return
        assert self._file is not None
        self._file.close()
        self._file = None
        for i in range(self._backup_count - 1, 0, -1):
            src = self._path.with_suffix(f".{i}.log")
            if src.exists():
                src.replace(self._path.with_suffix(f".{i + 1}.log"))
        self._path.replace(self._path.with_suffix(".1.log"))
        self._file = open(self._path, "ab")

    async def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None
