"""
Google Cloud Pub/Sub sink.

Each record is published as one JSON message; a message is either accepted by
Pub/Sub as a whole or not at all.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Optional

from chronicle.logging import get_logger
from chronicle.record import LogEvent
from chronicle.serialization import dumps

from ._google import translate_error
from .base import Payload, Sink

if TYPE_CHECKING:
    from google.cloud.pubsub_v1 import PublisherClient

logger = get_logger("chronicle.sinks.pubsub")


class PubSubSink(Sink):
    """Publishes records to a Pub/Sub topic.

    Args:
        project_id: GCP project owning the topic
        topic: Topic id (not the full path)
        publisher: Pre-built publisher client (default: created lazily)
        timeout: Seconds to wait for the publish acknowledgement
    """

    name = "pubsub"

    def __init__(
        self,
        project_id: str,
        topic: str,
        *,
        publisher: Optional["PublisherClient"] = None,
        timeout: Optional[float] = None,
    ):
        super().__init__(timeout=timeout)
        if not project_id or not topic:
            raise ValueError("Pub/Sub sink needs both a project id and a topic")
        self._project_id = project_id
        self._topic = topic
        self._publisher = publisher
        self._topic_path: Optional[str] = None

    @property
    def topic_path(self) -> str:
        if self._topic_path is None:
            self._topic_path = f"projects/{self._project_id}/topics/{self._topic}"
        return self._topic_path

    def _ensure_publisher(self) -> Any:
        if self._publisher is None:
            from google.cloud import pubsub_v1

            self._publisher = pubsub_v1.PublisherClient()
            logger.debug("sink.client_created", sink=self.name, topic=self.topic_path)
        return self._publisher

    async def _write(self, record: LogEvent, payload: Payload) -> None:
        attributes = {"level": payload["level"], "type_name": payload["type_name"]}
        if payload["correlation_key"]:
            attributes["correlation_key"] = payload["correlation_key"]

        try:
            future = self._ensure_publisher().publish(self.topic_path, dumps(payload), **attributes)
            await asyncio.wrap_future(future)
        except Exception as exc:
            raise translate_error(exc, sink=self.name) from exc

    async def close(self) -> None:
        if self._publisher is not None:
            await asyncio.to_thread(self._publisher.stop)
