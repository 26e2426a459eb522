"""
Diagnostic logging tests
"""

from __future__ import annotations

import io

import orjson
import pytest

from chronicle.logging import configure_from_settings, configure_logging, get_logger
from chronicle.logging.formatters import ConsoleFormatter


@pytest.fixture
def restore_logging():
    yield
    configure_from_settings()


class TestConfigureLogging:
    def test_json_output(self, restore_logging) -> None:
        stream = io.StringIO()
        configure_logging(level="DEBUG", fmt="json", stream=stream)

        get_logger("chronicle.test").info("sink.created", sink="file")

        event = orjson.loads(stream.getvalue().splitlines()[0])
        assert event["message"] == "sink.created"
        assert event["logger"] == "chronicle.test"
        assert event["level"] == "info"
        assert event["sink"] == "file"
        assert "timestamp" in event

    def test_level_filtering(self, restore_logging) -> None:
        stream = io.StringIO()
        configure_logging(level="WARNING", fmt="json", stream=stream)

        log = get_logger("chronicle.test")
        log.debug("hidden")
        log.warning("shown")

        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert orjson.loads(lines[0])["message"] == "shown"

    def test_console_output(self, restore_logging) -> None:
        stream = io.StringIO()
        configure_logging(level="INFO", fmt="console", stream=stream)

        get_logger("chronicle.test").info("product_info.overridden", company="Acme")

        line = stream.getvalue().splitlines()[0]
        assert "chronicle.test" in line
        assert line.endswith("product_info.overridden company=Acme")


class TestConsoleFormatter:
    def test_long_logger_name_is_trimmed_from_the_left(self) -> None:
        line = ConsoleFormatter.format(
            {"level": "info", "message": "hi", "logger": "x" * 40, "timestamp": "2024-01-01T00:00:00+00:00"},
            use_color=False,
        )
        columns = line.split(ConsoleFormatter.SEPARATOR)
        assert columns[2] == "..." + "x" * (ConsoleFormatter.LOGGER_WIDTH - 3)
        assert columns[3] == "hi"

    def test_color_applied_to_level(self) -> None:
        line = ConsoleFormatter.format({"level": "error", "message": "boom"}, use_color=True)
        assert "\x1b[31m" in line

    def test_empty_extras_skipped(self) -> None:
        line = ConsoleFormatter.format(
            {"level": "info", "message": "hi", "tags": [], "metadata": {}, "correlation_key": None},
            use_color=False,
        )
        assert line.endswith(" | hi")
