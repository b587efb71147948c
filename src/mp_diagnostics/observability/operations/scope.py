"""Observability operations – OperationScope.

An operation scope brackets a named unit of work with a ``Starting`` and a
``Completed`` log entry::

    with OperationScope(logger, name="Import"):
        ...

logs ``Import: Starting`` then ``Import: Completed [0.123s]``.
"""
from __future__ import annotations

import sys
import time
from datetime import timedelta
from typing import Any, Protocol, TextIO

from mp_diagnostics.kernel.errors import ArgumentError, InvalidArgumentError, InvalidStateError
from mp_diagnostics.observability.console import ansi
from mp_diagnostics.observability.console.styles import ConsoleContext
from mp_diagnostics.observability.logging.extensions import log_exception
from mp_diagnostics.observability.logging.levels import LogLevel
from mp_diagnostics.observability.logging.protocol import Logger
from mp_diagnostics.observability.logging.scopes import LogScope, begin_scope

_PACKAGE = __name__.rpartition(".")[0]

_NAME_STYLE = ansi.sgr(ansi.BOLD)
_STATUS_STYLE = ansi.sgr(ansi.FORE_BRIGHT_CYAN, ansi.NORMAL)
_TIME_STYLE = ansi.sgr(ansi.FORE_WHITE, ansi.fore_256(248))
_NOTICE_STYLE = ansi.sgr(ansi.BOLD, ansi.FORE_YELLOW)

_EXCEPTION_NOTICE = " [EXCEPTION]"


class _Caller:
    def __repr__(self) -> str:
        return "CALLER"


#: Default operation name: the name of the calling function.
CALLER: Any = _Caller()


def caller_name() -> str:
    """Return the name of the nearest calling function outside this package."""
    frame = sys._getframe(1)
    while frame.f_back is not None and frame.f_globals.get("__name__", "").startswith(_PACKAGE):
        frame = frame.f_back
    return frame.f_code.co_name


class ScopeActivity(Protocol):
    """Work started before and stopped after the logging of a scope."""

    def start(self) -> None: ...
    def stop(self, exception: BaseException | None) -> None: ...


class OperationScope:
    """A named logical operation, logged when it starts and when it completes.

    Parameters
    ----------
    logger:
        Receives the entries.  Must not be ``None``.
    level:
        Level of the ``Starting`` and ``Completed`` entries.
    name:
        Operation name; defaults to the name of the calling function.
    activity:
        Optional :class:`ScopeActivity` started before the ``Starting``
        entry and stopped after the ``Completed`` entry.
    start:
        When ``False`` the scope is not started until :meth:`start`.

    Set :attr:`exception` before the scope stops to report a failure; the
    exception is logged as its own entry at :attr:`exception_level` and the
    ``Completed`` entry gains an ``[EXCEPTION]`` notice.  Used as a context
    manager, an exception escaping the block is recorded automatically and
    is never suppressed.

    Each entry's message is a :class:`ScopeMessage` fixed to the phase it
    was logged in; its ``scope`` attribute is this scope.  ``str(scope)``
    is the text of the current phase.
    """

    def __init__(
        self,
        logger: Logger,
        level: int = LogLevel.INFORMATION,
        name: str | None = CALLER,
        *,
        activity: ScopeActivity | None = None,
        start: bool = True,
    ) -> None:
        if name is CALLER:
            name = caller_name()
        if logger is None:
            raise InvalidArgumentError.for_param("logger")
        if name is None:
            raise InvalidArgumentError.for_param("name")
        if not name:
            raise ArgumentError("Operation name cannot be empty.", param_name="name")

        self._logger = logger
        self._level = level
        self._name: str = name
        self._activity = activity
        self._log_scope: LogScope | None = None
        self._started_at: float | None = None
        self._elapsed = 0.0
        self._is_completed = False

        self.exception: BaseException | None = None
        self.exception_level: int = LogLevel.ERROR

        if start:
            self.start()

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    @property
    def level(self) -> int:
        return self._level

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def is_running(self) -> bool:
        return self._started_at is not None and not self._is_completed

    @property
    def is_completed(self) -> bool:
        return self._is_completed

    @property
    def duration(self) -> timedelta:
        """Elapsed time between start and stop; grows while running."""
        return timedelta(seconds=self._seconds)

    @property
    def _seconds(self) -> float:
        if self.is_running:
            return time.perf_counter() - self._started_at  # type: ignore[operator]
        return self._elapsed

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        if self._started_at is not None:
            raise InvalidStateError(f"Operation '{self._name}' has already been started.")

        if self._activity is not None:
            self._activity.start()
        try:
            self._log_scope = begin_scope(self._logger, self._name)
            self._logger.log(self._level, self.message())
        except BaseException as exc:
            log_scope, self._log_scope = self._log_scope, None
            if log_scope is not None:
                log_scope.close()
            if self._activity is not None:
                self._activity.stop(exc)
            raise
        self._started_at = time.perf_counter()

    def stop(self) -> None:
        """Complete the operation.  Does nothing unless the scope is running."""
        if not self.is_running:
            return

        self._elapsed = time.perf_counter() - self._started_at  # type: ignore[operator]
        self._is_completed = True

        try:
            if self.exception is not None:
                log_exception(self._logger, self.exception_level, self.exception)
            self._logger.log(self._level, self.message())
        finally:
            try:
                if self._activity is not None:
                    self._activity.stop(self.exception)
            finally:
                log_scope, self._log_scope = self._log_scope, None
                if log_scope is not None:
                    log_scope.close()

    def close(self) -> None:
        self.stop()

    def __enter__(self) -> OperationScope:
        return self

    def __exit__(self, exc_type: object, exc: BaseException | None, tb: object) -> None:
        if isinstance(exc, Exception) and self.exception is None:
            self.exception = exc
        self.stop()

    # ------------------------------------------------------------------
    # Messages
    # ------------------------------------------------------------------

    def message(self) -> ScopeMessage:
        """Return the message of the scope's current phase, fixed at this moment."""
        if not self._is_completed:
            return ScopeMessage(self)
        return ScopeMessage(self, completed=True, seconds=self._seconds, has_exception=self.exception is not None)

    def __str__(self) -> str:
        return str(self.message())

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, completed={self._is_completed})"

    def write_console(self, writer: TextIO, console: ConsoleContext) -> bool:
        return self.message().write_console(writer, console)


class ScopeMessage:
    """Message of one scope entry: ``Starting`` or ``Completed [..s]``.

    The text is fixed when the entry is logged, so handlers that format
    records later still render the phase the entry was logged in.
    ``scope`` is the :class:`OperationScope` that logged it.
    """

    __slots__ = ("completed", "has_exception", "scope", "seconds")

    def __init__(
        self,
        scope: OperationScope,
        *,
        completed: bool = False,
        seconds: float = 0.0,
        has_exception: bool = False,
    ) -> None:
        self.scope = scope
        self.completed = completed
        self.seconds = seconds
        self.has_exception = has_exception

    def __str__(self) -> str:
        if not self.completed:
            return f"{self.scope.name}: Starting"
        notice = _EXCEPTION_NOTICE if self.has_exception else ""
        return f"{self.scope.name}: Completed [{self.seconds:,.3f}s]{notice}"

    def __repr__(self) -> str:
        return f"ScopeMessage({str(self)!r})"

    def write_console(self, writer: TextIO, console: ConsoleContext) -> bool:
        color = console.is_color_enabled

        if color:
            writer.write(_NAME_STYLE)
        writer.write(self.scope.name)
        writer.write(": ")
        if color:
            writer.write(_STATUS_STYLE)

        if not self.completed:
            writer.write("Starting")
            return True

        writer.write("Completed")
        if color:
            writer.write(_TIME_STYLE)
        writer.write(f" [{self.seconds:,.3f}s]")

        if self.has_exception:
            if color:
                writer.write(_NOTICE_STYLE)
            writer.write(_EXCEPTION_NOTICE)
        return True


__all__ = ["CALLER", "OperationScope", "ScopeActivity", "ScopeMessage", "caller_name"]
