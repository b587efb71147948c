"""Observability – NullLogger."""
from __future__ import annotations

from typing import Any


class NullLogger:
    """Logger that is never enabled and discards everything."""

    def log(self, level: int, msg: object, *args: Any, **kwargs: Any) -> None:
        pass

    def isEnabledFor(self, level: int) -> bool:  # noqa: N802, ARG002
        return False


NULL_LOGGER = NullLogger()

__all__ = ["NULL_LOGGER", "NullLogger"]
