"""Observability – logger convenience functions."""
from __future__ import annotations

from mp_diagnostics.observability.logging.levels import LogLevel
from mp_diagnostics.observability.logging.protocol import Logger


def log_exception(logger: Logger, level: int, exception: BaseException) -> None:
    """Log *exception* as an entry of its own, with no message text."""
    logger.log(level, "", exc_info=exception)


def log_trace_exception(logger: Logger, exception: BaseException) -> None:
    log_exception(logger, LogLevel.TRACE, exception)


def log_debug_exception(logger: Logger, exception: BaseException) -> None:
    log_exception(logger, LogLevel.DEBUG, exception)


def log_information_exception(logger: Logger, exception: BaseException) -> None:
    log_exception(logger, LogLevel.INFORMATION, exception)


def log_warning_exception(logger: Logger, exception: BaseException) -> None:
    log_exception(logger, LogLevel.WARNING, exception)


def log_error_exception(logger: Logger, exception: BaseException) -> None:
    log_exception(logger, LogLevel.ERROR, exception)


def log_critical_exception(logger: Logger, exception: BaseException) -> None:
    log_exception(logger, LogLevel.CRITICAL, exception)


__all__ = [
    "log_critical_exception",
    "log_debug_exception",
    "log_error_exception",
    "log_exception",
    "log_information_exception",
    "log_trace_exception",
    "log_warning_exception",
]
