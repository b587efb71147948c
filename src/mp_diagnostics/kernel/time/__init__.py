"""Kernel time – Clock port + implementations."""
from mp_diagnostics.kernel.time.clock import Clock, FrozenClock, LocalClock, UtcClock

__all__ = ["Clock", "FrozenClock", "LocalClock", "UtcClock"]
