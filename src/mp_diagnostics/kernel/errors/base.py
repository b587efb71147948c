"""Kernel errors – BaseError, root of the mp-diagnostics error hierarchy."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


class BaseError(Exception):
    """Error with a stable machine-readable ``code`` and structured ``detail``.

    ``cause`` is chained as ``__cause__``.  :meth:`to_dict` returns the
    fields a structured log entry carries for the error.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: Mapping[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = self.default_code if code is None else code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        self.__cause__ = cause

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": dict(self.detail),
        }
        if self.cause is not None:
            payload["cause"] = f"{type(self.cause).__name__}: {self.cause}"
        return payload


__all__ = ["BaseError"]
