"""Unit tests for LoggingTraceListener."""

from __future__ import annotations

import uuid
from collections import defaultdict

import pytest

from mp_diagnostics.observability.legacy import LoggingTraceListener, TraceEventType
from mp_diagnostics.observability.logging import LogLevel
from mp_diagnostics.testing.fakes import FakeLogger


@pytest.fixture()
def loggers() -> defaultdict[str, FakeLogger]:
    return defaultdict(FakeLogger)


@pytest.fixture()
def listener(loggers: defaultdict[str, FakeLogger]) -> LoggingTraceListener:
    return LoggingTraceListener(logger_factory=loggers.__getitem__)


class TestTraceEvent:
    def test_message_without_args(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        listener.trace_event("App", TraceEventType.WARNING, 7, "Low disk")
        (entry,) = loggers["App"].entries
        assert entry.level == LogLevel.WARNING
        assert entry.message == "Low disk"
        assert entry.event_id == 7

    def test_template(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        listener.trace_event("App", TraceEventType.INFORMATION, 1, "{0} rows in {1}", 5, "orders")
        assert loggers["App"].messages == ["5 rows in orders"]

    def test_no_message_uses_id(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        listener.trace_event("App", TraceEventType.VERBOSE, 3)
        (entry,) = loggers["App"].entries
        assert entry.message == "Message ID: 3"
        assert entry.level == LogLevel.DEBUG

    def test_logger_name_fallbacks(self, loggers: defaultdict[str, FakeLogger]) -> None:
        LoggingTraceListener(logger_factory=loggers.__getitem__).trace_event(None, TraceEventType.INFORMATION, 1, "a")
        LoggingTraceListener("Named", logger_factory=loggers.__getitem__).trace_event(
            None, TraceEventType.INFORMATION, 1, "b"
        )
        assert loggers["Trace"].messages == ["a"]
        assert loggers["Named"].messages == ["b"]

    def test_filter(self, loggers: defaultdict[str, FakeLogger]) -> None:
        listener = LoggingTraceListener(
            logger_factory=loggers.__getitem__,
            filter=lambda source, event_type, event_id, message, args, data: event_id != 2,
        )
        listener.trace_event("App", TraceEventType.INFORMATION, 1, "kept")
        listener.trace_event("App", TraceEventType.INFORMATION, 2, "dropped")
        assert loggers["App"].messages == ["kept"]


class TestTraceTransferAndData:
    def test_transfer(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        related = uuid.UUID(int=5)
        listener.trace_transfer("App", 9, "Hop", related)
        (entry,) = loggers["App"].entries
        assert entry.level == LogLevel.INFORMATION
        assert entry.message == f"Hop {{related:{related}}}"

    def test_single_data(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        listener.trace_data("App", TraceEventType.INFORMATION, 1, 42)
        assert loggers["App"].messages == ["42"]

    def test_data_array(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        listener.trace_data("App", TraceEventType.INFORMATION, 1, "a", None, 3)
        assert loggers["App"].messages == ["a, , 3"]

    def test_exception_data(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        exc = ValueError("bad")
        listener.trace_data("App", TraceEventType.ERROR, 4, exc)
        (entry,) = loggers["App"].entries
        assert entry.exception is exc
        assert entry.message == ""
        assert entry.event_id == 4

    def test_fail(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        listener.fail("Failed", "detail")
        (entry,) = loggers["Trace"].entries
        assert entry.level == LogLevel.ERROR
        assert entry.message == "Failed detail"


class TestBufferedText:
    def test_flush_logs_buffer_at_debug(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        listener.write("a")
        listener.write("")
        listener.write_line("b")
        assert loggers["Trace"].entries == []
        listener.flush()
        (entry,) = loggers["Trace"].entries
        assert entry.level == LogLevel.DEBUG
        assert entry.message == "ab\n"

    def test_event_flushes_first(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        listener.write_line("pending")
        listener.trace_event(None, TraceEventType.INFORMATION, 1, "event")
        assert loggers["Trace"].messages == ["pending\n", "event"]

    def test_flush_empty_does_nothing(self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]) -> None:
        listener.flush()
        assert loggers["Trace"].entries == []

    def test_close_flushes_then_discards(
        self, listener: LoggingTraceListener, loggers: defaultdict[str, FakeLogger]
    ) -> None:
        with listener:
            listener.write("last")
        listener.trace_event(None, TraceEventType.ERROR, 1, "ignored")
        assert loggers["Trace"].messages == ["last"]
