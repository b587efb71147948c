"""Config settings – PrettyConsoleSettings.

Environment surface::

    PRETTY_CONSOLE_COLOR_BEHAVIOR=auto|enabled|disabled
    PRETTY_CONSOLE_USE_UTC_TIMESTAMP=true|false
    PRETTY_CONSOLE_LEVEL=TRACE|DEBUG|INFO|WARNING|ERROR|CRITICAL
"""
from __future__ import annotations

import dataclasses

from mp_diagnostics.config.settings.base import Settings
from mp_diagnostics.config.validation import InvalidSettingValueError
from mp_diagnostics.observability.console.options import ColorBehavior, PrettyConsoleFormatterOptions
from mp_diagnostics.observability.logging.levels import LogLevel

_LEVEL_NAMES = {
    "TRACE": LogLevel.TRACE,
    "DEBUG": LogLevel.DEBUG,
    "INFO": LogLevel.INFORMATION,
    "INFORMATION": LogLevel.INFORMATION,
    "WARNING": LogLevel.WARNING,
    "WARN": LogLevel.WARNING,
    "ERROR": LogLevel.ERROR,
    "CRITICAL": LogLevel.CRITICAL,
}


@dataclasses.dataclass
class PrettyConsoleSettings(Settings):
    """Settings for the pretty console logging setup."""

    _prefix = "PRETTY_CONSOLE"

    color_behavior: str = "auto"
    use_utc_timestamp: bool = False
    level: str = "INFO"

    def _validate(self) -> None:
        try:
            ColorBehavior(self.color_behavior.strip().lower())
        except ValueError:
            raise InvalidSettingValueError(
                "color_behavior", self.color_behavior, "expected auto, enabled or disabled"
            ) from None
        if self.level.strip().upper() not in _LEVEL_NAMES:
            raise InvalidSettingValueError("level", self.level, "unknown log level")

    @property
    def log_level(self) -> int:
        return int(_LEVEL_NAMES[self.level.strip().upper()])

    def to_options(self) -> PrettyConsoleFormatterOptions:
        return PrettyConsoleFormatterOptions(
            color_behavior=ColorBehavior(self.color_behavior.strip().lower()),
            use_utc_timestamp=self.use_utc_timestamp,
        )


__all__ = ["PrettyConsoleSettings"]
