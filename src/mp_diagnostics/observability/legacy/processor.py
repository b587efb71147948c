"""Observability legacy – CorrelationManagerSpanProcessor.

Mirrors span starts and ends onto the correlation manager:

* start: push the span's activity id; if the stack was empty, set
  ``activity_id`` to the root operation GUID of the span;
* end: pop, and reset ``activity_id`` to the empty GUID once the stack is
  empty again.

Only spans this processor saw start are popped on end, so spans started
before registration, or filtered out, leave the stack alone.
"""
from __future__ import annotations

import logging

from opentelemetry import trace
from opentelemetry.context import Context
from opentelemetry.sdk.trace import ReadableSpan, Span, SpanProcessor
from opentelemetry.sdk.util.instrumentation import InstrumentationScope

from mp_diagnostics.kernel.errors import InvalidStateError
from mp_diagnostics.observability.legacy.correlation import (
    EMPTY_GUID,
    CorrelationManagerPort,
    get_correlation_manager,
)
from mp_diagnostics.observability.tracing.activities import activity_id, root_operation_guid

logger = logging.getLogger(__name__)


def _key(span: ReadableSpan) -> tuple[int, int]:
    context = span.get_span_context()
    return context.trace_id, context.span_id


class CorrelationManagerSpanProcessor(SpanProcessor):
    """Flows span starts and ends to a correlation manager.

    Parameters
    ----------
    manager:
        Correlation manager to update; defaults to the process-wide one,
        looked up on each event.

    Override :meth:`should_flow_source` and :meth:`should_flow` to select
    which spans are mirrored; by default all are.
    """

    def __init__(self, manager: CorrelationManagerPort | None = None) -> None:
        self._manager = manager
        self._marked: set[tuple[int, int]] = set()
        self._is_shut_down = False

    @property
    def manager(self) -> CorrelationManagerPort:
        return self._manager if self._manager is not None else get_correlation_manager()

    def register(self, provider: object | None = None) -> CorrelationManagerSpanProcessor:
        """Add this processor to *provider* (default: the global tracer provider)."""
        if provider is None:
            provider = trace.get_tracer_provider()
        add = getattr(provider, "add_span_processor", None)
        if add is None:
            raise InvalidStateError(
                f"Tracer provider {type(provider).__name__} does not accept span processors."
            )
        add(self)
        return self

    def should_flow_source(self, scope: InstrumentationScope | None) -> bool:  # noqa: ARG002
        return True

    def should_flow(self, span: ReadableSpan) -> bool:  # noqa: ARG002
        return True

    def on_start(self, span: Span, parent_context: Context | None = None) -> None:  # noqa: ARG002
        if self._is_shut_down:
            return
        if not self.should_flow_source(getattr(span, "instrumentation_scope", None)):
            return
        if not self.should_flow(span):
            return

        manager = self.manager
        stack = manager.logical_operation_stack

        if len(stack) == 0:
            manager.activity_id = root_operation_guid(span)

        stack.push(activity_id(span))
        self._marked.add(_key(span))

    def on_end(self, span: ReadableSpan) -> None:
        key = _key(span)
        if key not in self._marked:
            return
        self._marked.discard(key)

        manager = self.manager
        stack = manager.logical_operation_stack

        if len(stack) == 0:
            logger.warning("correlation.stack_underflow span=%s", span.name)
        else:
            stack.pop()

        if len(stack) == 0:
            manager.activity_id = EMPTY_GUID

    def shutdown(self) -> None:
        self._is_shut_down = True

    def force_flush(self, timeout_millis: int = 30000) -> bool:  # noqa: ARG002
        return True

    def __enter__(self) -> CorrelationManagerSpanProcessor:
        return self

    def __exit__(self, *exc: object) -> None:
        self.shutdown()


__all__ = ["CorrelationManagerSpanProcessor"]
