"""Observability – Logger protocol."""
from __future__ import annotations

from typing import Any, Protocol


class Logger(Protocol):
    """Minimal leveled-logger protocol satisfied by :class:`logging.Logger`.

    Loggers may additionally expose ``begin_scope(state)``; see
    :func:`mp_diagnostics.observability.logging.scopes.begin_scope`.
    """

    def log(self, level: int, msg: object, *args: Any, **kwargs: Any) -> None: ...
    def isEnabledFor(self, level: int) -> bool: ...  # noqa: N802


__all__ = ["Logger"]
