from __future__ import annotations

import os

import pytest

from chronicle import runtime
from chronicle.levels import LogLevel


class TestLogLevel:
    def test_ordering(self) -> None:
        ordered = [
            LogLevel.TRACE,
            LogLevel.DEBUG,
            LogLevel.INFORMATION,
            LogLevel.WARNING,
            LogLevel.ERROR,
            LogLevel.CRITICAL,
            LogLevel.NONE,
        ]
        assert ordered == sorted(ordered)

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("information", LogLevel.INFORMATION),
            ("INFO", LogLevel.INFORMATION),
            (" warn ", LogLevel.WARNING),
            ("fatal", LogLevel.CRITICAL),
            ("none", LogLevel.NONE),
            (4, LogLevel.ERROR),
            (LogLevel.TRACE, LogLevel.TRACE),
        ],
    )
    def test_parse(self, raw, expected) -> None:
        assert LogLevel.parse(raw) is expected

    def test_parse_unknown(self) -> None:
        with pytest.raises(ValueError, match="Unknown log level"):
            LogLevel.parse("loud")

    def test_label(self) -> None:
        assert LogLevel.INFORMATION.label == "information"


class TestProcessInfo:
    def test_captured_once(self) -> None:
        assert runtime.process_info() is runtime.process_info()

    def test_reports_current_process(self) -> None:
        info = runtime.process_info()
        assert info.process_id == os.getpid()
        assert info.machine_name
        assert info.process_name
        assert info.process_path

    def test_forget_recaptures(self) -> None:
        first = runtime.process_info()
        runtime._forget()
        second = runtime.process_info()
        assert second is not first
        assert second == first
