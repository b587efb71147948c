"""Observability legacy – trace event types and message formatting."""
from __future__ import annotations

import uuid
from collections.abc import Sequence
from enum import IntEnum

from mp_diagnostics.observability.logging.levels import LogLevel


class TraceEventType(IntEnum):
    CRITICAL = 0x0001
    ERROR = 0x0002
    WARNING = 0x0004
    INFORMATION = 0x0008
    VERBOSE = 0x0010
    START = 0x0100
    STOP = 0x0200
    SUSPEND = 0x0400
    RESUME = 0x0800
    TRANSFER = 0x1000

    def to_log_level(self) -> LogLevel:
        return to_log_level(self)


_LOG_LEVELS: dict[int, LogLevel] = {
    TraceEventType.CRITICAL: LogLevel.CRITICAL,
    TraceEventType.ERROR: LogLevel.ERROR,
    TraceEventType.WARNING: LogLevel.WARNING,
    TraceEventType.INFORMATION: LogLevel.INFORMATION,
    TraceEventType.VERBOSE: LogLevel.DEBUG,
}


def to_log_level(event_type: int) -> LogLevel:
    """Map a trace event type to a log level; activity events are INFORMATION."""
    return _LOG_LEVELS.get(event_type, LogLevel.INFORMATION)


# ---------------------------------------------------------------------------
# Formatters
# ---------------------------------------------------------------------------


def format_message_id(event_id: int) -> str:
    return f"Message ID: {event_id}"


def format_message(message: str | None) -> str:
    return message or ""


def format_message_and_detail(message: str | None, detail: str | None) -> str:
    if not message:
        return detail or ""
    if not detail:
        return message
    return f"{message} {detail}"


def format_template(template: str | None, args: Sequence[object] | None) -> str:
    """Format *template* with positional ``{0}`` style placeholders; ``None`` args render empty."""
    return (template or "").format(*("" if arg is None else arg for arg in args or ()))


def format_transfer(message: str | None, related_activity_id: uuid.UUID) -> str:
    return f"{message or ''} {{related:{related_activity_id}}}"


def format_data(data: object) -> str:
    return "" if data is None else str(data)


def format_data_array(data: Sequence[object] | None) -> str:
    """Join *data* with ``", "``; ``None`` items render as empty text."""
    if not data:
        return ""
    return ", ".join(format_data(item) for item in data)


__all__ = [
    "TraceEventType",
    "format_data",
    "format_data_array",
    "format_message",
    "format_message_and_detail",
    "format_message_id",
    "format_template",
    "format_transfer",
    "to_log_level",
]
