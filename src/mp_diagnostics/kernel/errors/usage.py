"""Kernel errors – usage errors: invalid arguments and invalid object state.

These fail fast at API boundaries; nothing is partially constructed when
one of them is raised.
"""

from __future__ import annotations

from typing import Any

from mp_diagnostics.kernel.errors.base import BaseError


class InvalidArgumentError(BaseError, ValueError):
    """A required argument was ``None``."""

    default_code = "invalid_argument"

    def __init__(self, message: str, *, param_name: str | None = None, **kwargs: Any) -> None:
        if param_name is not None:
            kwargs.setdefault("detail", {"param_name": param_name})
        super().__init__(message, **kwargs)
        self.param_name = param_name

    @classmethod
    def for_param(cls, param_name: str) -> InvalidArgumentError:
        return cls(f"Argument '{param_name}' must not be None.", param_name=param_name)


class ArgumentError(InvalidArgumentError):
    """An argument was supplied but its value is unusable (e.g. empty)."""

    default_code = "argument_error"


class InvalidStateError(BaseError, RuntimeError):
    """The object is not in a state that permits the requested operation."""

    default_code = "invalid_state"


__all__ = ["ArgumentError", "InvalidArgumentError", "InvalidStateError"]
