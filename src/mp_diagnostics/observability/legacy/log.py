"""Observability legacy – Log facade and TraceOperation.

A static logging surface for code that predates injected loggers::

    Log.set_logger(logging.getLogger("app"))
    Log.information("Loaded {0} rows.", count)

    with TraceOperation("Import"):
        ...
"""
from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import datetime, timedelta
from typing import TypeVar

from opentelemetry.trace import Tracer

from mp_diagnostics.kernel.errors import InvalidArgumentError
from mp_diagnostics.kernel.time import UtcClock
from mp_diagnostics.observability.legacy.events import format_message, format_template
from mp_diagnostics.observability.logging.levels import LogLevel
from mp_diagnostics.observability.logging.null import NULL_LOGGER
from mp_diagnostics.observability.logging.protocol import Logger
from mp_diagnostics.observability.operations.activity import ActivityScope

T = TypeVar("T")


class Log:
    """Static logging facade over one process-wide logger.

    Each method accepts a message, a ``{0}`` style template with arguments,
    or an exception, which is logged as an exception entry.  Until a logger
    is set, everything is discarded.
    """

    _logger: Logger = NULL_LOGGER

    @classmethod
    def get_logger(cls) -> Logger:
        return cls._logger

    @classmethod
    def set_logger(cls, logger: Logger) -> None:
        if logger is None:
            raise InvalidArgumentError.for_param("logger")
        cls._logger = logger

    @classmethod
    def reset(cls) -> None:
        cls._logger = NULL_LOGGER

    @classmethod
    def flush(cls) -> None:
        pass

    @classmethod
    def close(cls) -> None:
        pass

    @classmethod
    def critical(cls, message: str | BaseException, *args: object, event_id: int = 0) -> None:
        cls._write(LogLevel.CRITICAL, event_id, message, args)

    @classmethod
    def error(cls, message: str | BaseException, *args: object, event_id: int = 0) -> None:
        cls._write(LogLevel.ERROR, event_id, message, args)

    @classmethod
    def warning(cls, message: str | BaseException, *args: object, event_id: int = 0) -> None:
        cls._write(LogLevel.WARNING, event_id, message, args)

    @classmethod
    def information(cls, message: str | BaseException, *args: object, event_id: int = 0) -> None:
        cls._write(LogLevel.INFORMATION, event_id, message, args)

    @classmethod
    def verbose(cls, message: str | BaseException, *args: object, event_id: int = 0) -> None:
        cls._write(LogLevel.DEBUG, event_id, message, args)

    @classmethod
    def _write(cls, level: int, event_id: int, message: str | BaseException, args: tuple[object, ...]) -> None:
        extra = {"event_id": event_id}
        if isinstance(message, BaseException):
            cls._logger.log(level, "", exc_info=message, extra=extra)
        elif args:
            cls._logger.log(level, format_template(message, args), extra=extra)
        else:
            cls._logger.log(level, format_message(message), extra=extra)


class TraceOperation(ActivityScope):
    """Activity scope logged through :class:`Log` at INFORMATION."""

    DEFAULT_NAME = "Operation"

    def __init__(self, name: str | None = None, *, tracer: Tracer | None = None) -> None:
        self._start_time = UtcClock.INSTANCE.now()
        super().__init__(Log.get_logger(), LogLevel.INFORMATION, name or self.DEFAULT_NAME, tracer=tracer)

    @property
    def start_time(self) -> datetime:
        return self._start_time

    @property
    def elapsed_time(self) -> timedelta:
        return self.duration

    @staticmethod
    def do(name: str | None, action: Callable[[], T]) -> T:
        if action is None:
            raise InvalidArgumentError.for_param("action")
        with TraceOperation(name):
            return action()

    @staticmethod
    async def do_async(name: str | None, action: Callable[[], Awaitable[T]]) -> T:
        if action is None:
            raise InvalidArgumentError.for_param("action")
        with TraceOperation(name):
            return await action()


__all__ = ["Log", "TraceOperation"]
