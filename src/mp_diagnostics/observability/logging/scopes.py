"""Observability – nested logging scopes.

A logging scope is an ambient, per-task value that annotates every record
logged while it is open.  Scopes are kept in the ``scopes`` key of the
structlog contextvars, as a tuple ordered outermost first, so that
``structlog.contextvars.merge_contextvars`` adds them to structlog events.
"""
from __future__ import annotations

from collections.abc import Mapping
from contextvars import Token
from typing import Any, Protocol

import structlog

SCOPES_KEY = "scopes"


class LogScope(Protocol):
    def close(self) -> None: ...


class ContextVarScope:
    """Scope bound onto the structlog contextvars until closed."""

    def __init__(self, state: object) -> None:
        self.state = state
        self._tokens: Mapping[str, Token[Any]] | None = structlog.contextvars.bind_contextvars(
            **{SCOPES_KEY: (*current_scopes(), state)}
        )

    def close(self) -> None:
        tokens, self._tokens = self._tokens, None
        if tokens is not None:
            structlog.contextvars.reset_contextvars(**tokens)

    def __enter__(self) -> ContextVarScope:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def current_scopes() -> tuple[object, ...]:
    """Return the open scopes of the current context, outermost first."""
    return tuple(structlog.contextvars.get_contextvars().get(SCOPES_KEY, ()))


def begin_scope(logger: Any, state: object) -> LogScope:
    """Open a logging scope for *logger*.

    Loggers that manage their own scopes (``begin_scope`` method) are used
    as-is; any other logger gets a :class:`ContextVarScope`.
    """
    own = getattr(logger, "begin_scope", None)
    if callable(own):
        return own(state)
    return ContextVarScope(state)


__all__ = ["SCOPES_KEY", "ContextVarScope", "LogScope", "begin_scope", "current_scopes"]
