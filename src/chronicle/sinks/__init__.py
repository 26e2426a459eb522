"""
Record sinks.

Design Pattern: Strategy Pattern. Each backend implements `Sink._write`;
`Sink.persist` is the shared contract. The Google Cloud sinks are imported
lazily so their client libraries load only when used.
"""

from .base import Sink
from .factory import create_sink
from .file import FileSink
from .memory import MemorySink, NullSink
from .stdio import StdioSink


def __getattr__(name: str):
    if name == "GCloudSink":
        from .gcloud import GCloudSink

        return GCloudSink
    if name == "PubSubSink":
        from .pubsub import PubSubSink

        return PubSubSink
    raise AttributeError(f"module 'chronicle.sinks' has no attribute {name}")


__all__ = [
    "Sink",
    "NullSink",
    "MemorySink",
    "StdioSink",
    "FileSink",
    "GCloudSink",
    "PubSubSink",
    "create_sink",
]
