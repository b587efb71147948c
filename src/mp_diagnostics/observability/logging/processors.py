"""Observability – structlog processors and get_logger helper.

ShortTraceIdProcessor: injects the 4-character trace fingerprint.
get_logger(name): returns a bound structlog logger.
"""
from __future__ import annotations

from typing import Any

import structlog
from opentelemetry import trace

from mp_diagnostics.observability.tracing.activities import short_trace_id


class ShortTraceIdProcessor:
    """structlog processor that adds ``short_trace_id`` for the current span.

    Nothing is added when no valid span is current.

    Usage::

        structlog.configure(processors=[ShortTraceIdProcessor(), ...])
    """

    key = "short_trace_id"

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        short = short_trace_id(trace.get_current_span())
        if short is not None:
            event_dict.setdefault(self.key, short)
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ShortTraceIdProcessor", "get_logger"]
