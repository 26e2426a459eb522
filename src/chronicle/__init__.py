"""
chronicle: structured log records and pluggable sinks.

Usage:
    from chronicle import LogEvent, LogLevel, override_product_info
    from chronicle.sinks import create_sink

    override_product_info("Acme", "billing", "2.3.0")
    event = LogEvent.new("disk usage high", LogLevel.WARNING, "infra", "disk")
    event.add_metadata("usedPct", 97)
    await create_sink("stdio").persist(event)
"""

from .exceptions import (
    ChronicleError,
    ConstructionError,
    ErrorKind,
    PersistError,
    SinkFailure,
    SinkTimeout,
    SinkUnauthorized,
    SinkUnreachable,
    ValidationError,
)
from .identity import ProductInfo, current_product_info, override_product_info, reset_product_info
from .levels import LogLevel
from .record import LogEvent, RecordFactory
from .runtime import ProcessInfo, process_info

__all__ = [
    "LogEvent",
    "LogLevel",
    "RecordFactory",
    "ProductInfo",
    "ProcessInfo",
    "current_product_info",
    "override_product_info",
    "reset_product_info",
    "process_info",
    "ChronicleError",
    "ConstructionError",
    "ValidationError",
    "ErrorKind",
    "PersistError",
    "SinkUnreachable",
    "SinkUnauthorized",
    "SinkTimeout",
    "SinkFailure",
]
