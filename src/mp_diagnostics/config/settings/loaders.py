"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import dataclasses
import os
import typing
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from mp_diagnostics.config.settings.base import Settings
from mp_diagnostics.config.validation import ConfigError, InvalidSettingValueError

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError("expected true/false, yes/no, on/off or 1/0")


_PARSERS: dict[Any, Callable[[str], Any]] = {
    bool: _parse_bool,
    int: int,
    float: float,
    str: str,
}


class EnvSettingsLoader:
    """Build a :class:`Settings` dataclass from environment variables.

    Variables that are not set leave the field at its default.  Values are
    parsed according to the field annotation (``str``, ``int``, ``float``
    or ``bool``).  *environ* replaces ``os.environ``, mainly for tests.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        hints = typing.get_type_hints(settings_class)
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = settings_class.env_key(field.name)
            if key not in environ:
                continue
            raw = environ[key]
            parse = _PARSERS.get(hints.get(field.name), str)
            try:
                values[field.name] = parse(raw)
            except ValueError as exc:
                raise InvalidSettingValueError(key, raw, str(exc)) from exc

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc


__all__ = ["EnvSettingsLoader"]
