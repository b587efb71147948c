"""Observability legacy – ambient correlation manager.

Older tracing code correlates entries through a process-wide *correlation
manager*: a stack of logical operation ids plus a current activity GUID.
``get_correlation_manager()`` returns the process-wide instance, creating it
on first use; tests swap in a fresh one with ``set_correlation_manager()``.
"""
from __future__ import annotations

import threading
import uuid
from collections.abc import Iterator
from typing import Protocol

EMPTY_GUID = uuid.UUID(int=0)


class LogicalOperationStack:
    """LIFO stack of logical operation ids."""

    def __init__(self) -> None:
        self._items: list[object] = []

    def push(self, operation_id: object) -> None:
        self._items.append(operation_id)

    def pop(self) -> object:
        if not self._items:
            raise IndexError("pop from an empty logical operation stack")
        return self._items.pop()

    def peek(self) -> object | None:
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[object]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)


class CorrelationManagerPort(Protocol):
    logical_operation_stack: LogicalOperationStack
    activity_id: uuid.UUID


class CorrelationManager:
    """Logical operation stack plus the current activity id."""

    def __init__(self) -> None:
        self.logical_operation_stack = LogicalOperationStack()
        self.activity_id: uuid.UUID = EMPTY_GUID

    def __repr__(self) -> str:
        return f"CorrelationManager(activity_id={self.activity_id}, depth={len(self.logical_operation_stack)})"


_manager: CorrelationManagerPort | None = None
_manager_lock = threading.Lock()


def get_correlation_manager() -> CorrelationManagerPort:
    """Return the process-wide correlation manager, creating it on first use."""
    global _manager
    manager = _manager
    if manager is not None:
        return manager
    with _manager_lock:
        if _manager is None:
            _manager = CorrelationManager()
        return _manager


def set_correlation_manager(manager: CorrelationManagerPort | None) -> CorrelationManagerPort | None:
    """Replace the process-wide correlation manager; return the previous one.

    ``None`` makes the next ``get_correlation_manager()`` create a new one.
    """
    global _manager
    with _manager_lock:
        previous, _manager = _manager, manager
    return previous


__all__ = [
    "EMPTY_GUID",
    "CorrelationManager",
    "CorrelationManagerPort",
    "LogicalOperationStack",
    "get_correlation_manager",
    "set_correlation_manager",
]
