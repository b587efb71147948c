"""Testing fakes – FakeLogger."""
from __future__ import annotations

import dataclasses
from typing import Any

from mp_diagnostics.kernel.errors import InvalidStateError


@dataclasses.dataclass(frozen=True)
class LogEntry:
    level: int
    message: str
    exception: BaseException | None = None
    event_id: int = 0
    msg: object = None


class FakeScope:
    """Scope opened by :meth:`FakeLogger.begin_scope`; must be closed innermost first."""

    def __init__(self, scopes: list[FakeScope], state: object) -> None:
        self.state = state
        self._scopes = scopes
        scopes.append(self)

    def close(self) -> None:
        if not self._scopes or self._scopes[-1] is not self:
            raise InvalidStateError("Attempted to close a scope other than the innermost scope.")
        self._scopes.pop()

    def __enter__(self) -> FakeScope:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class FakeLogger:
    """In-memory logger double that records entries and open scopes.

    Usage::

        logger = FakeLogger()
        with OperationScope(logger, name="Job"):
            pass
        assert [e.message for e in logger.entries] == ["Job: Starting", ...]

    Messages are rendered with ``str(msg) % args`` at the time of the call.
    """

    def __init__(self, minimum_level: int = 0) -> None:
        self.minimum_level = minimum_level
        self.entries: list[LogEntry] = []
        self.scopes: list[FakeScope] = []

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802
        return level >= self.minimum_level

    def log(self, level: int, msg: object, *args: Any, exc_info: Any = None, extra: Any = None, **kwargs: Any) -> None:  # noqa: ARG002
        if not self.isEnabledFor(level):
            return
        message = "" if msg is None else str(msg)
        if args:
            message = message % args
        event_id = (extra or {}).get("event_id", 0)
        self.entries.append(LogEntry(level, message, _exception_of(exc_info), event_id, msg))

    def begin_scope(self, state: object) -> FakeScope:
        return FakeScope(self.scopes, state)

    @property
    def messages(self) -> list[str]:
        return [entry.message for entry in self.entries]

    def reset(self) -> None:
        """Clear all recorded entries (useful between test cases)."""
        self.entries.clear()


def _exception_of(exc_info: Any) -> BaseException | None:
    if isinstance(exc_info, BaseException):
        return exc_info
    if isinstance(exc_info, tuple) and len(exc_info) == 3:
        return exc_info[1]
    return None


__all__ = ["FakeLogger", "FakeScope", "LogEntry"]
