"""Observability console – PrettyConsoleLoggerFactory."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, TextIO

import structlog

from mp_diagnostics.config.options import OptionsMonitor
from mp_diagnostics.observability.console.handler import PrettyConsoleHandler
from mp_diagnostics.observability.console.options import PrettyConsoleFormatterOptions
from mp_diagnostics.observability.logging.processors import ShortTraceIdProcessor

if TYPE_CHECKING:
    from mp_diagnostics.config.settings.console import PrettyConsoleSettings


class PrettyConsoleLoggerFactory:
    """Configure stdlib logging and structlog for pretty console output."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        options: PrettyConsoleFormatterOptions | None = None,
        stream: TextIO | None = None,
        settings: PrettyConsoleSettings | None = None,
    ) -> OptionsMonitor[PrettyConsoleFormatterOptions]:
        """Install a :class:`PrettyConsoleHandler` as the only root handler.

        *settings*, when given, take precedence over *level* and *options*.
        Returns the options monitor the handler observes; ``set`` a new
        options value on it to reconfigure output at runtime.
        """
        if settings is not None:
            level = settings.log_level
            options = settings.to_options()

        monitor = OptionsMonitor(options if options is not None else PrettyConsoleFormatterOptions())

        processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            ShortTraceIdProcessor(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.render_to_log_kwargs,
        ]
        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = PrettyConsoleHandler(stream=stream, options=monitor)
        root = logging.getLogger()
        for old in list(root.handlers):
            root.removeHandler(old)
            if isinstance(old, PrettyConsoleHandler):
                old.close()
        root.addHandler(handler)
        root.setLevel(level)
        return monitor


__all__ = ["PrettyConsoleLoggerFactory"]
