"""Unit tests for in-memory test fakes."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from mp_diagnostics.kernel.errors import InvalidStateError
from mp_diagnostics.kernel.time import FrozenClock
from mp_diagnostics.testing.fakes import FakeClock, FakeLogger


# ---------------------------------------------------------------------------
# FakeLogger
# ---------------------------------------------------------------------------


class TestFakeLogger:
    def test_records_rendered_message(self) -> None:
        logger = FakeLogger()
        logger.log(20, "%s rows", 3)
        (entry,) = logger.entries
        assert entry.level == 20
        assert entry.message == "3 rows"
        assert entry.msg == "%s rows"

    def test_minimum_level(self) -> None:
        logger = FakeLogger(minimum_level=30)
        logger.log(20, "dropped")
        logger.log(30, "kept")
        assert logger.messages == ["kept"]
        assert not logger.isEnabledFor(20)

    def test_exception_and_event_id(self) -> None:
        logger = FakeLogger()
        exc = ValueError("x")
        logger.log(40, "", exc_info=exc, extra={"event_id": 9})
        assert logger.entries[0].exception is exc
        assert logger.entries[0].event_id == 9

    def test_exc_info_tuple(self) -> None:
        logger = FakeLogger()
        exc = KeyError("k")
        logger.log(40, "failed", exc_info=(KeyError, exc, None))
        assert logger.entries[0].exception is exc

    def test_message_object_rendered_at_call_time(self) -> None:
        class Counter:
            value = 1

            def __str__(self) -> str:
                return f"value={self.value}"

        logger = FakeLogger()
        counter = Counter()
        logger.log(20, counter)
        counter.value = 2
        assert logger.messages == ["value=1"]
        assert logger.entries[0].msg is counter

    def test_reset(self) -> None:
        logger = FakeLogger()
        logger.log(20, "a")
        logger.reset()
        assert logger.entries == []


class TestFakeScope:
    def test_nested_scopes_close_in_order(self) -> None:
        logger = FakeLogger()
        with logger.begin_scope("outer"):
            with logger.begin_scope("inner"):
                assert [s.state for s in logger.scopes] == ["outer", "inner"]
        assert logger.scopes == []

    def test_out_of_order_close_raises(self) -> None:
        logger = FakeLogger()
        outer = logger.begin_scope("outer")
        logger.begin_scope("inner")
        with pytest.raises(InvalidStateError):
            outer.close()


# ---------------------------------------------------------------------------
# FakeClock
# ---------------------------------------------------------------------------


class TestFakeClock:
    def test_default_time(self) -> None:
        clock = FakeClock()
        assert isinstance(clock, FrozenClock)
        assert clock.now() == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

    def test_fixed_time_and_advance(self) -> None:
        clock = FakeClock(datetime(2026, 3, 1, 8, 30, tzinfo=UTC))
        clock.advance(minutes=5)
        assert clock.now() == datetime(2026, 3, 1, 8, 35, tzinfo=UTC)
