"""Observability – console logging, tracing helpers, operation scopes.

Import from the sub-packages::

    from mp_diagnostics.observability.console import PrettyConsoleLoggerFactory
    from mp_diagnostics.observability.operations import operation, activity
"""
