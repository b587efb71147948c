"""Observability logging – levels, scopes, structlog processors and exception helpers."""
from mp_diagnostics.observability.logging.extensions import (
    log_critical_exception,
    log_debug_exception,
    log_error_exception,
    log_exception,
    log_information_exception,
    log_trace_exception,
    log_warning_exception,
)
from mp_diagnostics.observability.logging.levels import LogLevel
from mp_diagnostics.observability.logging.null import NULL_LOGGER, NullLogger
from mp_diagnostics.observability.logging.processors import ShortTraceIdProcessor, get_logger
from mp_diagnostics.observability.logging.protocol import Logger
from mp_diagnostics.observability.logging.scopes import (
    SCOPES_KEY,
    ContextVarScope,
    LogScope,
    begin_scope,
    current_scopes,
)

__all__ = [
    "SCOPES_KEY",
    "ContextVarScope",
    "LogLevel",
    "LogScope",
    "Logger",
    "NULL_LOGGER",
    "NullLogger",
    "ShortTraceIdProcessor",
    "begin_scope",
    "current_scopes",
    "get_logger",
    "log_critical_exception",
    "log_debug_exception",
    "log_error_exception",
    "log_exception",
    "log_information_exception",
    "log_trace_exception",
    "log_warning_exception",
]
