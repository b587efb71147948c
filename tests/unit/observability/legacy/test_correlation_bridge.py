"""Unit tests for the correlation manager and CorrelationManagerSpanProcessor."""

from __future__ import annotations

import threading
import uuid
from collections.abc import Iterator

import pytest
from opentelemetry.sdk.trace import ReadableSpan, TracerProvider
from opentelemetry.trace import Tracer

from mp_diagnostics.kernel.errors import InvalidStateError
from mp_diagnostics.observability.legacy import (
    EMPTY_GUID,
    CorrelationManager,
    CorrelationManagerSpanProcessor,
    LogicalOperationStack,
    get_correlation_manager,
    set_correlation_manager,
)
from mp_diagnostics.observability.tracing import activity_id


@pytest.fixture()
def manager() -> CorrelationManager:
    return CorrelationManager()


@pytest.fixture()
def processor(tracer_provider: TracerProvider, manager: CorrelationManager) -> CorrelationManagerSpanProcessor:
    return CorrelationManagerSpanProcessor(manager).register(tracer_provider)


@pytest.fixture()
def global_manager() -> Iterator[None]:
    previous = set_correlation_manager(None)
    yield
    set_correlation_manager(previous)


class TestLogicalOperationStack:
    def test_push_pop_peek(self) -> None:
        stack = LogicalOperationStack()
        assert stack.peek() is None
        stack.push("a")
        stack.push("b")
        assert stack.peek() == "b"
        assert list(stack) == ["b", "a"]
        assert stack.pop() == "b"
        assert len(stack) == 1

    def test_pop_empty_raises(self) -> None:
        with pytest.raises(IndexError):
            LogicalOperationStack().pop()

    def test_clear(self) -> None:
        stack = LogicalOperationStack()
        stack.push(1)
        stack.clear()
        assert len(stack) == 0


class TestCorrelationManagerGlobal:
    def test_created_on_first_use(self, global_manager: None) -> None:
        first = get_correlation_manager()
        assert isinstance(first, CorrelationManager)
        assert get_correlation_manager() is first
        assert first.activity_id == EMPTY_GUID

    def test_set_returns_previous(self, global_manager: None) -> None:
        first = get_correlation_manager()
        replacement = CorrelationManager()
        assert set_correlation_manager(replacement) is first
        assert get_correlation_manager() is replacement

    def test_concurrent_first_use_creates_one(self, global_manager: None) -> None:
        seen: list[object] = []
        barrier = threading.Barrier(8)

        def worker() -> None:
            barrier.wait()
            seen.append(get_correlation_manager())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert len({id(m) for m in seen}) == 1


class TestCorrelationManagerSpanProcessor:
    def test_single_span(
        self, tracer: Tracer, processor: CorrelationManagerSpanProcessor, manager: CorrelationManager
    ) -> None:
        with tracer.start_as_current_span("op") as span:
            trace_hex = format(span.get_span_context().trace_id, "032x")
            assert len(manager.logical_operation_stack) == 1
            assert manager.logical_operation_stack.peek() == activity_id(span)
            assert manager.activity_id == uuid.UUID(hex=trace_hex)
        assert len(manager.logical_operation_stack) == 0
        assert manager.activity_id == EMPTY_GUID

    def test_nested_spans(
        self, tracer: Tracer, processor: CorrelationManagerSpanProcessor, manager: CorrelationManager
    ) -> None:
        with tracer.start_as_current_span("outer") as outer:
            root = manager.activity_id
            with tracer.start_as_current_span("inner") as inner:
                assert len(manager.logical_operation_stack) == 2
                assert manager.logical_operation_stack.peek() == activity_id(inner)
                assert manager.activity_id == root
            assert manager.logical_operation_stack.peek() == activity_id(outer)
            assert manager.activity_id == root
        assert manager.activity_id == EMPTY_GUID

    def test_span_started_before_registration_is_ignored(
        self, tracer: Tracer, tracer_provider: TracerProvider, manager: CorrelationManager
    ) -> None:
        early = tracer.start_span("early")
        CorrelationManagerSpanProcessor(manager).register(tracer_provider)
        with tracer.start_as_current_span("late"):
            early.end()
            assert len(manager.logical_operation_stack) == 1
        assert len(manager.logical_operation_stack) == 0

    def test_filtered_spans_are_skipped(
        self, tracer: Tracer, tracer_provider: TracerProvider, manager: CorrelationManager
    ) -> None:
        class OnlyOuter(CorrelationManagerSpanProcessor):
            def should_flow(self, span: ReadableSpan) -> bool:
                return span.name == "outer"

        OnlyOuter(manager).register(tracer_provider)
        with tracer.start_as_current_span("outer"):
            with tracer.start_as_current_span("inner"):
                assert len(manager.logical_operation_stack) == 1
            assert len(manager.logical_operation_stack) == 1
        assert len(manager.logical_operation_stack) == 0

    def test_shutdown_stops_flow(
        self, tracer: Tracer, processor: CorrelationManagerSpanProcessor, manager: CorrelationManager
    ) -> None:
        processor.shutdown()
        with tracer.start_as_current_span("op"):
            assert len(manager.logical_operation_stack) == 0

    def test_default_manager_is_global(self, tracer: Tracer, tracer_provider: TracerProvider, global_manager: None) -> None:
        processor = CorrelationManagerSpanProcessor().register(tracer_provider)
        assert processor.manager is get_correlation_manager()
        with tracer.start_as_current_span("op"):
            assert len(get_correlation_manager().logical_operation_stack) == 1

    def test_register_rejects_provider_without_processors(self) -> None:
        with pytest.raises(InvalidStateError):
            CorrelationManagerSpanProcessor().register(object())

    def test_force_flush(self) -> None:
        assert CorrelationManagerSpanProcessor().force_flush() is True
