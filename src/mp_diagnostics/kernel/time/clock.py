"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import ClassVar, Protocol


class Clock(Protocol):
    """Port: source of the current wall-clock time."""

    def now(self) -> datetime: ...


class LocalClock:
    """Clock reporting the local wall-clock time."""

    INSTANCE: ClassVar[LocalClock]

    def now(self) -> datetime:
        return datetime.now().astimezone()

    def __repr__(self) -> str:
        return "LocalClock()"


class UtcClock:
    """Clock reporting the current UTC time."""

    INSTANCE: ClassVar[UtcClock]

    def now(self) -> datetime:
        return datetime.now(UTC)

    def __repr__(self) -> str:
        return "UtcClock()"


LocalClock.INSTANCE = LocalClock()
UtcClock.INSTANCE = UtcClock()


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


__all__ = ["Clock", "FrozenClock", "LocalClock", "UtcClock"]
