"""Observability operations – scope initiators.

An initiator holds the arguments of a scope so that the scope can be begun
later, wrapped around a call, or applied as a decorator::

    @operation(logger)
    def import_orders() -> None: ...

    await activity(logger, name="Sync").do_async(sync_orders)
"""
from __future__ import annotations

import functools
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from opentelemetry.trace import Tracer

from mp_diagnostics.kernel.errors import InvalidArgumentError
from mp_diagnostics.observability.logging.levels import LogLevel
from mp_diagnostics.observability.logging.protocol import Logger
from mp_diagnostics.observability.operations.activity import ActivityScope
from mp_diagnostics.observability.operations.scope import CALLER, OperationScope, caller_name

T = TypeVar("T")
F = TypeVar("F", bound=Callable[..., Any])


class OperationScopeInitiator:
    """Begins :class:`OperationScope` instances with fixed arguments.

    When no *name* is given, scopes are named after the calling function;
    used as a decorator, after the decorated function.
    """

    def __init__(self, logger: Logger, level: int = LogLevel.INFORMATION, name: str | None = CALLER) -> None:
        if logger is None:
            raise InvalidArgumentError.for_param("logger")
        self._explicit_name = name is not CALLER
        self._logger = logger
        self._level = level
        self._name = name if self._explicit_name else caller_name()

    @property
    def logger(self) -> Logger:
        return self._logger

    @property
    def level(self) -> int:
        return self._level

    @property
    def name(self) -> str | None:
        return self._name

    def begin(self) -> OperationScope:
        """Begin a new, started scope."""
        return self._begin(self._name)

    def _begin(self, name: str | None) -> OperationScope:
        return OperationScope(self._logger, self._level, name)

    def do(self, action: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Call *action* inside a new scope and return its result.

        An exception raised by *action* is recorded on the scope and re-raised.
        """
        if action is None:
            raise InvalidArgumentError.for_param("action")
        with self.begin():
            return action(*args, **kwargs)

    async def do_async(self, action: Callable[..., Awaitable[T]], *args: Any, **kwargs: Any) -> T:
        """Await *action* inside a new scope and return its result."""
        if action is None:
            raise InvalidArgumentError.for_param("action")
        with self.begin():
            return await action(*args, **kwargs)

    def __call__(self, func: F) -> F:
        name = self._name if self._explicit_name else func.__name__

        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                with self._begin(name):
                    return await func(*args, **kwargs)

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            with self._begin(name):
                return func(*args, **kwargs)

        return wrapper  # type: ignore[return-value]


class ActivityScopeInitiator(OperationScopeInitiator):
    """Begins :class:`ActivityScope` instances with fixed arguments."""

    def __init__(
        self,
        logger: Logger,
        level: int = LogLevel.INFORMATION,
        name: str | None = CALLER,
        *,
        tracer: Tracer | None = None,
    ) -> None:
        super().__init__(logger, level, name)
        self._tracer = tracer

    def begin(self) -> ActivityScope:
        return self._begin(self._name)

    def _begin(self, name: str | None) -> ActivityScope:
        return ActivityScope(self._logger, self._level, name, tracer=self._tracer)


def operation(logger: Logger, level: int = LogLevel.INFORMATION, name: str | None = CALLER) -> OperationScopeInitiator:
    """Return an initiator of plain operation scopes."""
    return OperationScopeInitiator(logger, level, name)


def activity(
    logger: Logger,
    level: int = LogLevel.INFORMATION,
    name: str | None = CALLER,
    *,
    tracer: Tracer | None = None,
) -> ActivityScopeInitiator:
    """Return an initiator of activity scopes, each with its own span."""
    return ActivityScopeInitiator(logger, level, name, tracer=tracer)


__all__ = ["ActivityScopeInitiator", "OperationScopeInitiator", "activity", "operation"]
