"""Observability – LogLevel.

Severity levels aligned with the standard library's level numbers, plus
``TRACE`` below ``DEBUG`` and ``NONE`` above ``CRITICAL``.
"""
from __future__ import annotations

import logging
from enum import IntEnum


class LogLevel(IntEnum):
    TRACE = 5
    DEBUG = logging.DEBUG
    INFORMATION = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL
    NONE = 60


logging.addLevelName(LogLevel.TRACE, "TRACE")

__all__ = ["LogLevel"]
