"""Config validation – ConfigError, InvalidSettingValueError."""
from __future__ import annotations

from mp_diagnostics.kernel.errors import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded."""

    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A setting is present but its value cannot be used.

    *setting_name* is the environment key when raised while loading, or the
    field name when raised by a settings class's own validation.
    """

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Invalid value {value!r} for setting {setting_name}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
