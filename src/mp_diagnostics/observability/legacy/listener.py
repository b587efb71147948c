"""Observability legacy – LoggingTraceListener.

Adapts the classic trace-listener interface (``trace_event``,
``trace_data``, ``write_line``, ...) onto loggers, so code written against
that interface ends up in ordinary log records.
"""
from __future__ import annotations

import logging
import threading
import uuid
from collections.abc import Callable
from typing import Any, Protocol

from mp_diagnostics.observability.legacy.events import (
    TraceEventType,
    format_data,
    format_data_array,
    format_message,
    format_message_and_detail,
    format_message_id,
    format_template,
    format_transfer,
    to_log_level,
)
from mp_diagnostics.observability.logging.levels import LogLevel
from mp_diagnostics.observability.logging.null import NULL_LOGGER
from mp_diagnostics.observability.logging.protocol import Logger

DEFAULT_LOGGER_NAME = "Trace"


class TraceFilter(Protocol):
    """Decides whether a trace call is forwarded."""

    def __call__(
        self,
        source: str | None,
        event_type: TraceEventType,
        event_id: int,
        message: str | None,
        args: tuple[object, ...] | None,
        data: tuple[object, ...] | None,
    ) -> bool: ...


class LoggingTraceListener:
    """Trace listener that forwards to loggers from *logger_factory*.

    Parameters
    ----------
    name:
        Listener name; used as the logger name when a call has no source.
    logger_factory:
        Returns the logger for a name.  Defaults to :func:`logging.getLogger`.
    filter:
        Optional :class:`TraceFilter`; calls it rejects are dropped.

    Text given to :meth:`write` and :meth:`write_line` is buffered and
    logged at DEBUG when flushed, which happens before every event.
    """

    def __init__(
        self,
        name: str | None = None,
        logger_factory: Callable[[str], Logger] = logging.getLogger,
        filter: TraceFilter | None = None,  # noqa: A002
    ) -> None:
        self.name = name
        self.filter = filter
        self._logger_factory: Callable[[str], Logger] | None = logger_factory
        self._buffer: list[str] = []
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def trace_event(
        self,
        source: str | None,
        event_type: TraceEventType,
        event_id: int,
        message: str | None = None,
        *args: object,
    ) -> None:
        if not self._should_trace(source, event_type, event_id, message, args or None, None):
            return

        self.flush()

        if message is None and not args:
            text = format_message_id(event_id)
        elif args:
            text = format_template(message, args)
        else:
            text = format_message(message)
        self._log(source, to_log_level(event_type), event_id, text)

    def trace_transfer(
        self,
        source: str | None,
        event_id: int,
        message: str | None,
        related_activity_id: uuid.UUID,
    ) -> None:
        if not self._should_trace(
            source, TraceEventType.TRANSFER, event_id, message, (related_activity_id,), None
        ):
            return

        self.flush()

        text = format_transfer(message, related_activity_id)
        self._log(source, to_log_level(TraceEventType.TRANSFER), event_id, text)

    def trace_data(self, source: str | None, event_type: TraceEventType, event_id: int, *data: object) -> None:
        """Log *data*; a single exception is logged as an exception entry."""
        if not self._should_trace(source, event_type, event_id, None, None, data):
            return

        self.flush()

        level = to_log_level(event_type)
        if len(data) == 1 and isinstance(data[0], BaseException):
            self._log(source, level, event_id, "", exc_info=data[0])
        elif len(data) == 1:
            self._log(source, level, event_id, format_data(data[0]))
        else:
            self._log(source, level, event_id, format_data_array(data))

    def fail(self, message: str | None, detail: str | None = None) -> None:
        self.flush()
        self._log(None, LogLevel.ERROR, 0, format_message_and_detail(message, detail))

    # ------------------------------------------------------------------
    # Buffered text
    # ------------------------------------------------------------------

    def write(self, message: str | None) -> None:
        if not message:
            return
        with self._lock:
            self._buffer.append(message)

    def write_line(self, message: str | None = None) -> None:
        with self._lock:
            self._buffer.append((message or "") + "\n")

    def flush(self) -> None:
        text = self._take_buffered_text()
        if text:
            self._log(None, LogLevel.DEBUG, 0, text)

    def close(self) -> None:
        """Flush, then stop forwarding anything."""
        self.flush()
        self._logger_factory = None

    def __enter__(self) -> LoggingTraceListener:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _take_buffered_text(self) -> str | None:
        if not self._buffer:
            return None
        with self._lock:
            text = "".join(self._buffer)
            self._buffer.clear()
        return text

    def _should_trace(
        self,
        source: str | None,
        event_type: TraceEventType,
        event_id: int,
        message: str | None,
        args: tuple[object, ...] | None,
        data: tuple[object, ...] | None,
    ) -> bool:
        return self.filter is None or self.filter(source, event_type, event_id, message, args, data)

    def _get_logger(self, source: str | None = None) -> Logger:
        factory = self._logger_factory
        if factory is None:
            return NULL_LOGGER
        return factory(source or self.name or DEFAULT_LOGGER_NAME)

    def _log(self, source: str | None, level: int, event_id: int, text: str, **kwargs: Any) -> None:
        extra: dict[str, Any] = {"event_id": event_id}
        self._get_logger(source).log(level, text, extra=extra, **kwargs)


__all__ = ["DEFAULT_LOGGER_NAME", "LoggingTraceListener", "TraceFilter"]
