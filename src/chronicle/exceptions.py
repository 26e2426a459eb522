"""
Chronicle exception hierarchy.

Record errors (construction, validation) are raised synchronously by the record
model. Persist errors are raised by `Sink.persist` and are the only exceptions
a sink lets escape; transport-specific errors are translated into them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ChronicleError(Exception):
    """Base class for every chronicle error."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


class ErrorKind(str, Enum):
    """Reasons a record refuses a construction or mutation."""

    EMPTY_MESSAGE = "EMPTY_MESSAGE"
    MISSING_IDENTITY = "MISSING_IDENTITY"
    EMPTY_KEY = "EMPTY_KEY"
    DUPLICATE_KEY = "DUPLICATE_KEY"


# ================================
# Record errors
# ================================


class RecordError(ChronicleError):
    """Base for errors raised by the record model."""

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=kind.value, details=details)
        self.kind = kind


class ConstructionError(RecordError):
    """A record could not be created (empty message or incomplete identity)."""


class ValidationError(RecordError):
    """A setter or enrichment call received an unusable argument."""


def empty_message(error_type: type[RecordError]) -> RecordError:
    return error_type(ErrorKind.EMPTY_MESSAGE, "Record message must not be empty")


def missing_identity(company: Optional[str], name: Optional[str], version: Optional[str]) -> ConstructionError:
    return ConstructionError(
        ErrorKind.MISSING_IDENTITY,
        "You must provide product company, name and version before creating records",
        details={"company": company, "name": name, "version": version},
    )


# ================================
# Persist errors
# ================================


class PersistError(ChronicleError):
    """A sink failed to persist a record.

    Never retried by chronicle; the caller decides what to do next.
    """

    default_code = "PERSIST_FAILED"

    def __init__(
        self,
        message: str,
        *,
        sink: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message, code=self.default_code, details={"sink": sink, **(details or {})})
        self.sink = sink


class SinkUnreachable(PersistError):
    """The destination could not be reached (network down, closed stream, missing path)."""

    default_code = "SINK_UNREACHABLE"


class SinkUnauthorized(PersistError):
    """The destination rejected our credentials or permissions."""

    default_code = "SINK_UNAUTHORIZED"


class SinkTimeout(PersistError):
    """The persist call exceeded the sink's timeout.

    The outcome is unknown: the write may still complete after this is raised.
    """

    default_code = "SINK_TIMEOUT"


class SinkFailure(PersistError):
    """Any other backend failure."""

    default_code = "SINK_FAILURE"


__all__ = [
    "ChronicleError",
    "ErrorKind",
    "RecordError",
    "ConstructionError",
    "ValidationError",
    "PersistError",
    "SinkUnreachable",
    "SinkUnauthorized",
    "SinkTimeout",
    "SinkFailure",
]
