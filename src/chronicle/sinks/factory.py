"""
Builds a single sink from `SinkSettings`.
"""

from __future__ import annotations

from typing import Optional

from chronicle.config.sinks import SinkSettings
from chronicle.logging import get_logger

from .base import Sink

logger = get_logger("chronicle.sinks.factory")


def create_sink(name: Optional[str] = None, settings: Optional[SinkSettings] = None) -> Sink:
    """Create the sink called `name` (default: `settings.default`).

    Raises:
        ValueError: Unknown sink name, or missing Pub/Sub project/topic.
    """
    if settings is None:
        from chronicle.config import settings as app_settings

        settings = app_settings.sinks

    sink_name = (name or settings.default).strip().lower()
    timeout = settings.timeout

    sink: Sink
    if sink_name == "null":
        from .memory import NullSink

        sink = NullSink(timeout=timeout)
    elif sink_name == "memory":
        from .memory import MemorySink

        sink = MemorySink(timeout=timeout)
    elif sink_name == "stdio":
        from .stdio import StdioSink

        sink = StdioSink(fmt=settings.stdio_format, timeout=timeout)
    elif sink_name == "file":
        from .file import FileSink

        sink = FileSink(
            settings.file_path,
            max_bytes=settings.file_max_bytes,
            backup_count=settings.file_backup_count,
            timeout=timeout,
        )
    elif sink_name == "gcloud":
        from .gcloud import GCloudSink

        sink = GCloudSink(project_id=settings.gcloud_project, log_name=settings.gcloud_log_name, timeout=timeout)
    elif sink_name == "pubsub":
        from .pubsub import PubSubSink

        sink = PubSubSink(settings.pubsub_project or "", settings.pubsub_topic or "", timeout=timeout)
    else:
        raise ValueError(f"Unknown sink: {sink_name!r}")

    logger.debug("sink.selected", sink=sink_name, timeout=timeout)
    return sink
