"""
Google Cloud Logging sink.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Any, Optional

from chronicle.levels import LogLevel
from chronicle.logging import get_logger
from chronicle.record import LogEvent

from ._google import translate_error
from .base import Payload, Sink

if TYPE_CHECKING:
    from google.cloud.logging import Client as GCloudLoggingClient

logger = get_logger("chronicle.sinks.gcloud")

SEVERITY_MAP = {
    LogLevel.TRACE: "DEBUG",
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFORMATION: "INFO",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
    LogLevel.CRITICAL: "CRITICAL",
    LogLevel.NONE: "DEFAULT",
}


class GCloudSink(Sink):
    """Writes records as structured entries to Google Cloud Logging.

    The client is created lazily on the first persist call, so credential
    problems surface as persist errors.
    """

    name = "gcloud"

    def __init__(
        self,
        project_id: Optional[str] = None,
        log_name: str = "chronicle",
        *,
        client: Optional["GCloudLoggingClient"] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(timeout=timeout)
        self._project_id = project_id
        self._log_name = log_name
        self._client = client
        self._logger: Any = client.logger(log_name) if client is not None else None
        self._lock = threading.Lock()

    def _ensure_logger(self) -> Any:
        with self._lock:
            if self._logger is None:
                from google.cloud import logging as gcloud_logging

                self._client = gcloud_logging.Client(project=self._project_id)
                self._logger = self._client.logger(self._log_name)
                logger.debug("sink.client_created", sink=self.name, project=self._project_id, log_name=self._log_name)
            return self._logger

    def _log_struct(self, payload: Payload, severity: str, labels: dict[str, str]) -> None:
        try:
            self._ensure_logger().log_struct(payload, severity=severity, labels=labels)
        except Exception as exc:
            raise translate_error(exc, sink=self.name) from exc

    async def _write(self, record: LogEvent, payload: Payload) -> None:
        labels = {"type_name": payload["type_name"], "product": payload["product_name"]}
        if payload["correlation_key"]:
            labels["correlation_key"] = payload["correlation_key"]
        await self._run_blocking(self._log_struct, payload, SEVERITY_MAP[record.level], labels)

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()
