"""Observability tracing – span identity and status helpers.

Spans are OpenTelemetry spans, whose ids are always W3C.  Ids of any other
(hierarchical) format are handled as plain text: pass the root id string
instead of a span.
"""
from __future__ import annotations

import functools
import uuid

from opentelemetry.trace import Span, Status, StatusCode

from mp_diagnostics.kernel.errors import InvalidStateError

_LFSR_SEED = 0xD91E8A62B35A7D6E
_MASK_64 = 0xFFFFFFFFFFFFFFFF


# ---------------------------------------------------------------------------
# Short trace id
# ---------------------------------------------------------------------------


def fill_letters_and_digits(text: str, width: int = 4) -> str:
    """Return the first *width* letters or digits of *text*, padded with ``.``."""
    chars = [c for c in text if c.isalpha() or c.isdecimal()][:width]
    return "".join(chars).ljust(width, ".")


@functools.singledispatch
def short_trace_id(source: object) -> str | None:
    """Return the 4-character fingerprint of a trace.

    For a span: the last two bytes of the trace id as lowercase hex, or
    ``None`` when the span context is invalid (no current span).  For a text
    id: its first four letters or digits.
    """
    if source is None:
        return None
    raise TypeError(f"Cannot derive a short trace id from {type(source).__name__}.")


@short_trace_id.register
def _(source: Span) -> str | None:
    context = source.get_span_context()
    if not context.is_valid:
        return None
    return format(context.trace_id & 0xFFFF, "04x")


@short_trace_id.register
def _(source: str) -> str | None:
    return fill_letters_and_digits(source)


# ---------------------------------------------------------------------------
# Root operation id
# ---------------------------------------------------------------------------


def _not_started() -> InvalidStateError:
    return InvalidStateError("Cannot get root operation id for an unstarted span.")


@functools.singledispatch
def root_operation_id(source: object) -> str:
    """Return the root operation id: the 32-hex trace id, or the text id itself.

    Raises :class:`InvalidStateError` when no id has been assigned.
    """
    if source is None:
        raise _not_started()
    raise TypeError(f"Cannot derive a root operation id from {type(source).__name__}.")


@root_operation_id.register
def _(source: Span) -> str:
    trace_id = source.get_span_context().trace_id
    if not trace_id:
        raise _not_started()
    return format(trace_id, "032x")


@root_operation_id.register
def _(source: str) -> str:
    if not source:
        raise _not_started()
    return source


@functools.singledispatch
def root_operation_guid(source: object) -> uuid.UUID:
    """Return the root operation id as a GUID.

    A span's trace id bytes are the GUID; a text id is hashed with
    :func:`synthesize_guid`.
    """
    return uuid.UUID(hex=root_operation_id(source))


@root_operation_guid.register
def _(source: str) -> uuid.UUID:
    return synthesize_guid(root_operation_id(source))


def synthesize_guid(text: str) -> uuid.UUID:
    """Deterministically map *text* to a version-4 GUID.

    A 64-bit linear feedback shift register (taps 0, 2, 5, 7) absorbs the
    UTF-16 code units of *text* and is then clocked to produce 16 bytes.  Not
    suitable for anything security related.
    """
    reg = _LFSR_SEED

    encoded = text.encode("utf-16-le")
    for i in range(0, len(encoded), 2):
        reg = _clock_lfsr(reg)
        reg = (reg + int.from_bytes(encoded[i:i + 2], "little")) & _MASK_64

    data = bytearray(16)
    for index in range(16):
        for _round in range(8):
            reg = _clock_lfsr(reg)
        data[index] = reg & 0xFF

    # RFC 4122 version 4, variant 1
    data[7] = (data[7] & 0x0F) | 0x40
    data[8] = (data[8] & 0x3F) | 0x80

    return uuid.UUID(bytes_le=bytes(data))


def _clock_lfsr(reg: int) -> int:
    bit = (reg ^ (reg >> 2) ^ (reg >> 5) ^ (reg >> 7)) & 1
    return (reg >> 1) | (bit << 63)


def activity_id(span: Span) -> str | None:
    """Return the W3C ``traceparent``-style id of *span*, or ``None`` if invalid."""
    context = span.get_span_context()
    if not context.is_valid:
        return None
    return f"00-{context.trace_id:032x}-{context.span_id:016x}-{int(context.trace_flags):02x}"


# ---------------------------------------------------------------------------
# Status and tags
# ---------------------------------------------------------------------------


def get_status_code(span: Span) -> StatusCode:
    """Return the status code of *span*; non-recording spans report ``UNSET``."""
    status = getattr(span, "status", None)
    if status is None:
        return StatusCode.UNSET
    return status.status_code


def set_status_if_unset(span: Span, exception: BaseException | None) -> None:
    """Set OK, or ERROR with the exception message, unless a status is already set."""
    if get_status_code(span) is not StatusCode.UNSET:
        return
    if exception is not None:
        span.set_status(Status(StatusCode.ERROR, str(exception)))
    else:
        span.set_status(Status(StatusCode.OK))


def set_telemetry_tags(span: Span, name: str) -> None:
    """Tag *span* so that dependency-tracking backends report it as in-process work.

    ``error`` reflects the span status at the time of the call.
    """
    span.set_attribute("peer.service", "InProc")
    span.set_attribute("peer.hostname", "internal")
    span.set_attribute("db.statement", f"Activity: {name}")
    span.set_attribute("error", "true" if get_status_code(span) is StatusCode.ERROR else "false")


__all__ = [
    "activity_id",
    "fill_letters_and_digits",
    "get_status_code",
    "root_operation_guid",
    "root_operation_id",
    "set_status_if_unset",
    "set_telemetry_tags",
    "short_trace_id",
    "synthesize_guid",
]
