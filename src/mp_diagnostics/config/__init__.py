"""Config – environment settings, validation errors, hot-reloadable options."""
from mp_diagnostics.config.options import OptionsMonitor, Subscription
from mp_diagnostics.config.settings import EnvSettingsLoader, PrettyConsoleSettings, Settings
from mp_diagnostics.config.validation import ConfigError, InvalidSettingValueError

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "OptionsMonitor",
    "PrettyConsoleSettings",
    "Settings",
    "Subscription",
]
