"""Observability operations – ActivityScope: an operation scope with its own span."""
from __future__ import annotations

from opentelemetry import context, trace
from opentelemetry.trace import Span, Tracer

from mp_diagnostics.observability.logging.levels import LogLevel
from mp_diagnostics.observability.logging.protocol import Logger
from mp_diagnostics.observability.operations.scope import CALLER, OperationScope, caller_name
from mp_diagnostics.observability.tracing.activities import set_status_if_unset, set_telemetry_tags

TRACER_NAME = "mp_diagnostics.operations"


class SpanActivity:
    """Starts a span as the current span and ends it with an OK/ERROR status.

    A status set explicitly on the span before it ends is left unchanged.
    """

    def __init__(self, name: str, tracer: Tracer | None = None) -> None:
        self.name = name
        self._tracer = tracer if tracer is not None else trace.get_tracer(TRACER_NAME)
        self._span: Span | None = None
        self._token: object | None = None

    @property
    def span(self) -> Span:
        """The span; an invalid span until started."""
        return self._span if self._span is not None else trace.INVALID_SPAN

    def start(self) -> None:
        span = self._tracer.start_span(self.name)
        self._span = span
        self._token = context.attach(trace.set_span_in_context(span))

    def stop(self, exception: BaseException | None) -> None:
        span = self._span
        if span is None:
            return
        try:
            set_status_if_unset(span, exception)
            set_telemetry_tags(span, self.name)
            span.end()
        finally:
            token, self._token = self._token, None
            if token is not None:
                context.detach(token)  # type: ignore[arg-type]


class ActivityScope(OperationScope):
    """:class:`OperationScope` that also runs a span for the operation.

    The span is current from before the ``Starting`` entry until after the
    ``Completed`` entry, so both carry its trace id.
    """

    def __init__(
        self,
        logger: Logger,
        level: int = LogLevel.INFORMATION,
        name: str | None = CALLER,
        *,
        tracer: Tracer | None = None,
        start: bool = True,
    ) -> None:
        if name is CALLER:
            name = caller_name()
        self._span_activity = SpanActivity(name, tracer)  # type: ignore[arg-type]
        super().__init__(logger, level, name, activity=self._span_activity, start=start)

    @property
    def span(self) -> Span:
        return self._span_activity.span


__all__ = ["TRACER_NAME", "ActivityScope", "SpanActivity"]
