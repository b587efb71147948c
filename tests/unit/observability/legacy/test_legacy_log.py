"""Unit tests for the Log facade and TraceOperation."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from datetime import timedelta

import pytest
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import Tracer

from mp_diagnostics.kernel.errors import InvalidArgumentError
from mp_diagnostics.observability.legacy import Log, TraceOperation
from mp_diagnostics.observability.logging import NULL_LOGGER, LogLevel
from mp_diagnostics.testing.fakes import FakeLogger


@pytest.fixture()
def logger() -> Iterator[FakeLogger]:
    fake = FakeLogger()
    Log.set_logger(fake)
    yield fake
    Log.reset()


class TestLog:
    def test_default_logger_discards(self) -> None:
        assert Log.get_logger() is NULL_LOGGER
        Log.information("nothing")

    def test_set_none_rejected(self) -> None:
        with pytest.raises(InvalidArgumentError):
            Log.set_logger(None)  # type: ignore[arg-type]

    def test_levels(self, logger: FakeLogger) -> None:
        Log.critical("c")
        Log.error("e")
        Log.warning("w")
        Log.information("i")
        Log.verbose("v")
        assert [(e.level, e.message) for e in logger.entries] == [
            (LogLevel.CRITICAL, "c"),
            (LogLevel.ERROR, "e"),
            (LogLevel.WARNING, "w"),
            (LogLevel.INFORMATION, "i"),
            (LogLevel.DEBUG, "v"),
        ]

    def test_template_and_event_id(self, logger: FakeLogger) -> None:
        Log.information("Loaded {0} rows.", 12, event_id=5)
        (entry,) = logger.entries
        assert entry.message == "Loaded 12 rows."
        assert entry.event_id == 5

    def test_percent_text_is_not_interpolated(self, logger: FakeLogger) -> None:
        Log.information("100% done")
        assert logger.messages == ["100% done"]

    def test_exception(self, logger: FakeLogger) -> None:
        exc = RuntimeError("boom")
        Log.error(exc)
        (entry,) = logger.entries
        assert entry.exception is exc
        assert entry.message == ""

    def test_flush_and_close_are_harmless(self, logger: FakeLogger) -> None:
        Log.flush()
        Log.close()
        Log.information("still here")
        assert logger.messages == ["still here"]


class TestTraceOperation:
    def test_logs_through_log(self, logger: FakeLogger, tracer: Tracer) -> None:
        with TraceOperation("Import", tracer=tracer) as op:
            assert op.level == LogLevel.INFORMATION
        assert [m.split(" [")[0] for m in logger.messages] == ["Import: Starting", "Import: Completed"]
        assert op.elapsed_time >= timedelta(0)
        assert op.start_time.tzinfo is not None

    def test_default_name(self, logger: FakeLogger, tracer: Tracer) -> None:
        with TraceOperation(tracer=tracer) as op:
            pass
        assert op.name == "Operation"

    def test_span(self, logger: FakeLogger, tracer: Tracer, span_exporter: InMemorySpanExporter) -> None:
        with TraceOperation("Import", tracer=tracer):
            pass
        assert [s.name for s in span_exporter.get_finished_spans()] == ["Import"]

    def test_do(self, logger: FakeLogger) -> None:
        assert TraceOperation.do("Job", lambda: 3) == 3
        assert len(logger.entries) == 2

    def test_do_none_action(self, logger: FakeLogger) -> None:
        with pytest.raises(InvalidArgumentError):
            TraceOperation.do("Job", None)  # type: ignore[arg-type]

    def test_do_async_records_exception(self, logger: FakeLogger) -> None:
        async def fail() -> None:
            raise ValueError("boom")

        with pytest.raises(ValueError):
            asyncio.run(TraceOperation.do_async("Job", fail))
        assert len(logger.entries) == 3
        assert logger.entries[-1].message.endswith("[EXCEPTION]")
