"""Observability legacy – correlation manager bridge and trace-listener adapter."""
from mp_diagnostics.observability.legacy.correlation import (
    EMPTY_GUID,
    CorrelationManager,
    CorrelationManagerPort,
    LogicalOperationStack,
    get_correlation_manager,
    set_correlation_manager,
)
from mp_diagnostics.observability.legacy.events import TraceEventType, to_log_level
from mp_diagnostics.observability.legacy.listener import LoggingTraceListener, TraceFilter
from mp_diagnostics.observability.legacy.log import Log, TraceOperation
from mp_diagnostics.observability.legacy.processor import CorrelationManagerSpanProcessor

__all__ = [
    "EMPTY_GUID",
    "CorrelationManager",
    "CorrelationManagerPort",
    "CorrelationManagerSpanProcessor",
    "Log",
    "LogicalOperationStack",
    "LoggingTraceListener",
    "TraceEventType",
    "TraceFilter",
    "TraceOperation",
    "get_correlation_manager",
    "set_correlation_manager",
    "to_log_level",
]
