"""
mp_diagnostics – pretty console logging, operation scopes and trace correlation.

Import path convention::

    from mp_diagnostics.observability.console import PrettyConsoleHandler
    from mp_diagnostics.observability.operations import operation, activity
    from mp_diagnostics.observability.legacy import CorrelationManagerSpanProcessor
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
