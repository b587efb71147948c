"""Testing fakes – in-memory doubles for loggers and clocks."""
from mp_diagnostics.testing.fakes.clock import FakeClock
from mp_diagnostics.testing.fakes.logger import FakeLogger, FakeScope, LogEntry

__all__ = ["FakeClock", "FakeLogger", "FakeScope", "LogEntry"]
