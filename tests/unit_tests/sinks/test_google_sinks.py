"""
Google Cloud sink tests (mocked clients)
"""

from __future__ import annotations

from concurrent.futures import Future
from unittest.mock import MagicMock
from uuid import UUID

import orjson
import pytest
from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions

from chronicle import LogEvent, LogLevel
from chronicle.exceptions import SinkFailure, SinkTimeout, SinkUnauthorized, SinkUnreachable
from chronicle.sinks._google import translate_error
from chronicle.sinks.gcloud import GCloudSink
from chronicle.sinks.pubsub import PubSubSink

KEY = UUID("12345678-1234-5678-1234-567812345678")


def _resolved(value: object) -> Future:
    future: Future = Future()
    future.set_result(value)
    return future


def _failed(exc: BaseException) -> Future:
    future: Future = Future()
    future.set_exception(exc)
    return future


class TestTranslateError:
    @pytest.mark.parametrize(
        "exc, expected",
        [
            (api_exceptions.PermissionDenied("denied"), SinkUnauthorized),
            (api_exceptions.Unauthenticated("who"), SinkUnauthorized),
            (auth_exceptions.DefaultCredentialsError("no creds"), SinkUnauthorized),
            (api_exceptions.ServiceUnavailable("down"), SinkUnreachable),
            (api_exceptions.NotFound("no topic"), SinkUnreachable),
            (ConnectionRefusedError("refused"), SinkUnreachable),
            (api_exceptions.DeadlineExceeded("slow"), SinkTimeout),
            (api_exceptions.InternalServerError("boom"), SinkFailure),
            (RuntimeError("odd"), SinkFailure),
        ],
    )
    def test_mapping(self, exc, expected) -> None:
        error = translate_error(exc, sink="pubsub")
        assert type(error) is expected
        assert error.sink == "pubsub"
        assert error.details["error"] == type(exc).__name__


class TestGCloudSink:
    @pytest.mark.asyncio
    async def test_writes_structured_entry(self) -> None:
        client = MagicMock()
        sink = GCloudSink(log_name="chronicle-test", client=client)

        event = LogEvent.new("disk usage high", LogLevel.WARNING, "disk").set_correlation_key(KEY)
        await sink.persist(event)

        client.logger.assert_called_once_with("chronicle-test")
        cloud_logger = client.logger.return_value
        cloud_logger.log_struct.assert_called_once()
        payload = cloud_logger.log_struct.call_args.args[0]
        kwargs = cloud_logger.log_struct.call_args.kwargs
        assert payload["message"] == "disk usage high"
        assert kwargs["severity"] == "WARNING"
        assert kwargs["labels"] == {
            "type_name": "LogEvent",
            "product": "Chronicle Tests",
            "correlation_key": str(KEY),
        }

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "level, severity",
        [(LogLevel.TRACE, "DEBUG"), (LogLevel.INFORMATION, "INFO"), (LogLevel.NONE, "DEFAULT")],
    )
    async def test_severity_mapping(self, level, severity) -> None:
        client = MagicMock()
        await GCloudSink(client=client).persist(LogEvent.new("hello", level))
        assert client.logger.return_value.log_struct.call_args.kwargs["severity"] == severity

    @pytest.mark.asyncio
    async def test_permission_denied_is_unauthorized(self) -> None:
        client = MagicMock()
        client.logger.return_value.log_struct.side_effect = api_exceptions.PermissionDenied("denied")

        with pytest.raises(SinkUnauthorized) as exc_info:
            await GCloudSink(client=client).persist(LogEvent.new("hello"))
        assert isinstance(exc_info.value.__cause__, api_exceptions.PermissionDenied)

    @pytest.mark.asyncio
    async def test_close_closes_client(self) -> None:
        client = MagicMock()
        async with GCloudSink(client=client):
            pass
        client.close.assert_called_once()


class TestPubSubSink:
    @pytest.mark.asyncio
    async def test_publishes_json_with_attributes(self) -> None:
        publisher = MagicMock()
        publisher.publish.return_value = _resolved("message-1")
        sink = PubSubSink("my-project", "logs", publisher=publisher)

        event = LogEvent.new("disk usage high", LogLevel.ERROR).set_correlation_key(KEY)
        await sink.persist(event)

        args, kwargs = publisher.publish.call_args
        assert args[0] == "projects/my-project/topics/logs"
        assert orjson.loads(args[1])["message"] == "disk usage high"
        assert kwargs == {"level": "error", "type_name": "LogEvent", "correlation_key": str(KEY)}

    @pytest.mark.asyncio
    async def test_failed_publish_is_translated(self) -> None:
        """A transport that always fails yields a PersistError, never a raw google error"""
        publisher = MagicMock()
        publisher.publish.return_value = _failed(api_exceptions.ServiceUnavailable("down"))
        sink = PubSubSink("my-project", "logs", publisher=publisher)

        with pytest.raises(SinkUnreachable):
            await sink.persist(LogEvent.new("hello"))

    @pytest.mark.asyncio
    async def test_publish_call_error_is_translated(self) -> None:
        publisher = MagicMock()
        publisher.publish.side_effect = api_exceptions.Unauthenticated("who")
        with pytest.raises(SinkUnauthorized):
            await PubSubSink("my-project", "logs", publisher=publisher).persist(LogEvent.new("hello"))

    @pytest.mark.asyncio
    async def test_unacknowledged_publish_times_out(self) -> None:
        publisher = MagicMock()
        publisher.publish.return_value = Future()
        sink = PubSubSink("my-project", "logs", publisher=publisher, timeout=0.01)

        with pytest.raises(SinkTimeout):
            await sink.persist(LogEvent.new("hello"))

    def test_requires_project_and_topic(self) -> None:
        with pytest.raises(ValueError):
            PubSubSink("", "logs")

    @pytest.mark.asyncio
    async def test_close_stops_publisher(self) -> None:
        publisher = MagicMock()
        await PubSubSink("my-project", "logs", publisher=publisher).close()
        publisher.stop.assert_called_once()
