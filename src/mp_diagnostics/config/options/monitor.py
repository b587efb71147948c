"""Config options – OptionsMonitor.

An atomically swappable reference to the current options value plus a list
of change listeners.  Readers never block: ``current_value`` is a single
attribute read, and ``set`` replaces the reference in one assignment.
"""
from __future__ import annotations

import logging
import threading
from typing import Callable, Generic, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Subscription:
    """Handle returned by :meth:`OptionsMonitor.on_change`; close to unsubscribe."""

    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe: Callable[[], None] | None = unsubscribe

    @property
    def closed(self) -> bool:
        return self._unsubscribe is None

    def close(self) -> None:
        unsubscribe, self._unsubscribe = self._unsubscribe, None
        if unsubscribe is not None:
            unsubscribe()

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class OptionsMonitor(Generic[T]):
    """Holds the latest options value and notifies listeners on change.

    Parameters
    ----------
    initial:
        The options value in effect until the first :meth:`set`.

    Example
    -------
    ::

        monitor = OptionsMonitor(PrettyConsoleFormatterOptions())
        sub = monitor.on_change(lambda opts: print("now", opts))
        monitor.set(PrettyConsoleFormatterOptions(use_utc_timestamp=True))
        sub.close()
    """

    def __init__(self, initial: T) -> None:
        self._current = initial
        self._listeners: tuple[Callable[[T], None], ...] = ()
        self._lock = threading.Lock()

    @property
    def current_value(self) -> T:
        return self._current

    def set(self, value: T) -> None:
        """Replace the current value and notify every listener."""
        self._current = value
        self.notify_changed()

    def notify_changed(self) -> None:
        """Re-deliver the current value to every listener (e.g. after in-place edits)."""
        value = self._current
        for listener in self._listeners:
            listener(value)

    def on_change(self, listener: Callable[[T], None]) -> Subscription:
        with self._lock:
            self._listeners = (*self._listeners, listener)
        logger.debug("options listener registered: %r", listener)
        return Subscription(lambda: self._remove(listener))

    def _remove(self, listener: Callable[[T], None]) -> None:
        with self._lock:
            listeners = list(self._listeners)
            if listener in listeners:
                listeners.remove(listener)
            self._listeners = tuple(listeners)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)


__all__ = ["OptionsMonitor", "Subscription"]
