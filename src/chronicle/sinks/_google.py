"""
Translation of Google Cloud client errors into persist errors.
"""

from __future__ import annotations

from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions

from chronicle.exceptions import PersistError, SinkFailure, SinkTimeout, SinkUnauthorized, SinkUnreachable

_UNAUTHORIZED = (
    api_exceptions.Unauthenticated,
    api_exceptions.PermissionDenied,
    api_exceptions.Unauthorized,
    api_exceptions.Forbidden,
    auth_exceptions.DefaultCredentialsError,
    auth_exceptions.RefreshError,
)
_UNREACHABLE = (
    api_exceptions.ServiceUnavailable,
    api_exceptions.NotFound,
    auth_exceptions.TransportError,
    ConnectionError,
)
_TIMEOUT = (api_exceptions.DeadlineExceeded,)


def translate_error(exc: BaseException, *, sink: str) -> PersistError:
    """Map a google-cloud / google-auth exception to the persist error taxonomy."""
    details = {"error": type(exc).__name__}
    if isinstance(exc, _UNAUTHORIZED):
        return SinkUnauthorized(f"{sink} rejected credentials: {exc}", sink=sink, details=details)
    if isinstance(exc, _TIMEOUT):
        return SinkTimeout(f"{sink} deadline exceeded: {exc}", sink=sink, details=details)
    if isinstance(exc, _UNREACHABLE):
        return SinkUnreachable(f"{sink} unreachable: {exc}", sink=sink, details=details)
    return SinkFailure(f"{sink} failed: {exc}", sink=sink, details=details)
