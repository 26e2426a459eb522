"""
Record model.

A `LogEvent` is one structured log event: caller content (level, message,
correlation key, tags, metadata) plus the product identity and process facts
of the process that built it. Records are enriched in place through fluent
setters that return the same instance, then handed to a sink.

Thread fields:
    `thread_id` and `thread_name` are read from the *calling* thread every time
    they are accessed, so a record read on another thread reports that thread.
    `origin_thread_id` and `origin_thread_name` hold the thread that
    constructed the record.

A single record is meant to be built by one flow at a time; concurrent
mutation of the same instance is not supported.
"""

from __future__ import annotations

import threading
from datetime import datetime, timezone
from types import MappingProxyType
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar, Union
from uuid import UUID

from .exceptions import ConstructionError, ErrorKind, ValidationError, empty_message, missing_identity
from .identity import ProductInfo, current_product_info
from .levels import LogLevel
from .runtime import ProcessInfo, process_info

CorrelationKey = Union[UUID, str]

E = TypeVar("E", bound="LogEvent")


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


class LogEvent:
    """One structured log event."""

    def __init__(
        self,
        message: str,
        level: LogLevel = LogLevel.INFORMATION,
        *tags: str,
        product: Optional[ProductInfo] = None,
    ) -> None:
        if _is_blank(message):
            raise empty_message(ConstructionError)

        product = product if product is not None else current_product_info()
        if not product.is_complete:
            raise missing_identity(product.company, product.name, product.version)

        self._product_company: str = product.company  # type: ignore[assignment]
        self._product_name: str = product.name  # type: ignore[assignment]
        self._product_version: str = product.version  # type: ignore[assignment]
        self._process: ProcessInfo = process_info()

        current = threading.current_thread()
        self._origin_thread_id = threading.get_ident()
        self._origin_thread_name = current.name
        self._created_at = datetime.now(timezone.utc)

        self._message = message
        self._level = LogLevel(level)
        self._correlation_key: Optional[CorrelationKey] = None
        self._tags: set[str] = set()
        self._metadata: Dict[str, Any] = {}
        self.add_tags(*tags)

    @classmethod
    def new(cls: Type[E], message: str, level: LogLevel = LogLevel.INFORMATION, *tags: str) -> E:
        """Create a record stamped with the process-wide product identity."""
        return cls(message, level, *tags)

    # =========================================================================
    # Identity and runtime context
    # =========================================================================

    @property
    def type_name(self) -> str:
        return type(self).__name__

    @property
    def product_company(self) -> str:
        return self._product_company

    @property
    def product_name(self) -> str:
        return self._product_name

    @property
    def product_version(self) -> str:
        return self._product_version

    @property
    def machine_name(self) -> str:
        return self._process.machine_name

    @property
    def process_id(self) -> int:
        return self._process.process_id

    @property
    def process_name(self) -> str:
        return self._process.process_name

    @property
    def process_path(self) -> str:
        return self._process.process_path

    @property
    def thread_id(self) -> int:
        return threading.get_ident()

    @property
    def thread_name(self) -> str:
        return threading.current_thread().name

    @property
    def origin_thread_id(self) -> int:
        return self._origin_thread_id

    @property
    def origin_thread_name(self) -> str:
        return self._origin_thread_name

    @property
    def created_at(self) -> datetime:
        return self._created_at

    # =========================================================================
    # Caller content
    # =========================================================================

    @property
    def message(self) -> str:
        return self._message

    @property
    def level(self) -> LogLevel:
        return self._level

    @property
    def correlation_key(self) -> Optional[CorrelationKey]:
        return self._correlation_key

    @property
    def tags(self) -> frozenset[str]:
        return frozenset(self._tags)

    @property
    def metadata(self) -> Mapping[str, Any]:
        return MappingProxyType(self._metadata)

    def set_message(self: E, message: str) -> E:
        if _is_blank(message):
            raise empty_message(ValidationError)
        self._message = message
        return self

    def set_level(self: E, level: LogLevel) -> E:
        self._level = LogLevel(level)
        return self

    def set_correlation_key(self: E, key: Optional[CorrelationKey]) -> E:
        self._correlation_key = key
        return self

    def add_tags(self: E, *tags: str) -> E:
        for tag in tags:
            if not _is_blank(tag):
                self._tags.add(tag)
        return self

    def add_metadata(self: E, key: str, value: Any) -> E:
        if _is_blank(key):
            raise ValidationError(ErrorKind.EMPTY_KEY, "Metadata key must not be empty")
        if key in self._metadata:
            raise ValidationError(
                ErrorKind.DUPLICATE_KEY,
                f"Metadata key '{key}' is already present",
                details={"key": key},
            )
        self._metadata[key] = value
        return self

    def to_dict(self) -> Dict[str, Any]:
        from .serialization import record_to_dict

        return record_to_dict(self)

    def __repr__(self) -> str:
        return f"<{self.type_name} level={self._level.label} message={self._message!r} tags={sorted(self._tags)}>"


class RecordFactory(Generic[E]):
    """Builds records stamped with an explicit product identity.

    Usage:
        factory = RecordFactory(ProductInfo("Acme", "billing", "2.3.0"))
        event = factory.new("invoice sent", LogLevel.INFORMATION, "billing")
    """

    def __init__(self, product: ProductInfo, event_type: Type[E] = LogEvent) -> None:  # type: ignore[assignment]
        if not product.is_complete:
            raise missing_identity(product.company, product.name, product.version)
        self.product = product
        self.event_type = event_type

    @classmethod
    def from_process(cls, event_type: Type[E] = LogEvent) -> "RecordFactory[E]":  # type: ignore[assignment]
        """Bind the current process-wide identity."""
        return cls(current_product_info(), event_type)

    def new(self, message: str, level: LogLevel = LogLevel.INFORMATION, *tags: str) -> E:
        return self.event_type(message, level, *tags, product=self.product)
