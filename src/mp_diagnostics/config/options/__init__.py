"""Config options – hot-reloadable options holder."""
from mp_diagnostics.config.options.monitor import OptionsMonitor, Subscription

__all__ = ["OptionsMonitor", "Subscription"]
