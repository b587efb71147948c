"""Config settings – environment-backed settings dataclasses."""
from mp_diagnostics.config.settings.base import Settings
from mp_diagnostics.config.settings.console import PrettyConsoleSettings
from mp_diagnostics.config.settings.loaders import EnvSettingsLoader

__all__ = ["EnvSettingsLoader", "PrettyConsoleSettings", "Settings"]
