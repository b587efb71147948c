"""Observability console – PrettyConsoleFormatter.

Renders one log record as one console line::

    [23:59:59] #4c9b info: This is the message.

The ``#4c9b`` field is the short trace id of the current OpenTelemetry span,
or ``.....`` when no span is current.
"""
from __future__ import annotations

import dataclasses
import io
import logging
from datetime import datetime
from typing import TextIO

from opentelemetry import trace

from mp_diagnostics.config.options import OptionsMonitor
from mp_diagnostics.kernel.errors import InvalidArgumentError
from mp_diagnostics.kernel.time import Clock, LocalClock, UtcClock
from mp_diagnostics.observability.console.formattable import ConsoleFormattable, StringConsoleFormattable
from mp_diagnostics.observability.console.info import is_redirected
from mp_diagnostics.observability.console.options import ColorBehavior, PrettyConsoleFormatterOptions
from mp_diagnostics.observability.console.styles import ColorTheme, MonoTheme, Styles, Theme
from mp_diagnostics.observability.logging.levels import LogLevel
from mp_diagnostics.observability.tracing.activities import short_trace_id

_LEVEL_TAGS: dict[int, str] = {
    LogLevel.TRACE: "trce",
    LogLevel.DEBUG: "dbug",
    LogLevel.INFORMATION: "info",
    LogLevel.WARNING: "warn",
    LogLevel.ERROR: "FAIL",
    LogLevel.CRITICAL: "CRIT",
}

_BLANK_TAG = "    "
_NO_TRACE_ID = "..... "

_COLOR_THEME = ColorTheme()
_MONO_THEME = MonoTheme()


def format_level(level: int) -> str:
    """Return the 4-character tag for *level*; blank for unmapped levels."""
    return _LEVEL_TAGS.get(level, _BLANK_TAG)


@dataclasses.dataclass(frozen=True, slots=True)
class _Configuration:
    options: PrettyConsoleFormatterOptions
    clock: Clock
    is_color_enabled: bool
    theme: Theme


class PrettyConsoleFormatter(logging.Formatter):
    """Compact, optionally colorized single-line console formatter.

    Parameters
    ----------
    options:
        Monitor supplying the current :class:`PrettyConsoleFormatterOptions`.
        Every change is applied to subsequent writes without rebuilding the
        formatter.
    stream:
        The stream output goes to; used only to decide whether ``AUTO`` color
        behavior should colorize.

    Each configuration is an immutable snapshot replaced in one assignment,
    so a concurrent options change never affects a write in progress.
    """

    NAME = "pretty"

    def __init__(
        self,
        options: OptionsMonitor[PrettyConsoleFormatterOptions] | None,
        stream: TextIO | None = None,
    ) -> None:
        if options is None:
            raise InvalidArgumentError.for_param("options")
        super().__init__()
        self._monitor = options
        self._is_console_redirected = is_redirected(stream)
        self._config = self._build(options.current_value)
        self._subscription = options.on_change(self._configure)

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def options(self) -> PrettyConsoleFormatterOptions:
        return self._config.options

    @property
    def is_color_enabled(self) -> bool:
        return self._config.is_color_enabled

    @property
    def is_console_redirected(self) -> bool:
        return self._is_console_redirected

    @is_console_redirected.setter
    def is_console_redirected(self, value: bool) -> None:
        # takes effect on the next options change, as with real redirection
        self._is_console_redirected = value

    @property
    def clock(self) -> Clock:
        return self._config.clock

    @clock.setter
    def clock(self, value: Clock) -> None:
        self._config = dataclasses.replace(self._config, clock=value)

    def _configure(self, options: PrettyConsoleFormatterOptions) -> None:
        self._config = self._build(options)

    def _build(self, options: PrettyConsoleFormatterOptions) -> _Configuration:
        clock: Clock = UtcClock.INSTANCE if options.use_utc_timestamp else LocalClock.INSTANCE

        if options.color_behavior == ColorBehavior.DISABLED:
            color = False
        elif options.color_behavior == ColorBehavior.ENABLED:
            color = True
        else:
            color = not self._is_console_redirected

        return _Configuration(
            options=options,
            clock=clock,
            is_color_enabled=color,
            theme=_COLOR_THEME if color else _MONO_THEME,
        )

    def close(self) -> None:
        """Stop observing options changes."""
        self._subscription.close()

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def format(self, record: logging.LogRecord) -> str:
        buffer = io.StringIO()
        self.write(record, buffer)
        return buffer.getvalue().removesuffix("\n")

    def write(self, record: logging.LogRecord, writer: TextIO) -> None:
        """Write *record* to *writer* as one line, or write nothing.

        Nothing is written when the record has neither message text nor an
        exception.
        """
        config = self._config

        message = record.msg
        if isinstance(message, ConsoleFormattable) and not record.args:
            formattable: ConsoleFormattable = message
        elif text := self._get_message(record):
            formattable = StringConsoleFormattable(text)
        elif _has_exception(record):
            formattable = StringConsoleFormattable()
        else:
            return

        styles = config.theme.get_styles(record.levelno)

        self._write_timestamp(writer, styles, config.clock.now())
        self._write_trace_id(writer, styles)
        self._write_level(writer, styles, record.levelno)
        self._write_separator(writer, styles)

        wrote_message = formattable.write_console(writer, styles.message_context)

        self._write_exception(writer, styles, record, wrote_message)
        self._write_end_of_line(writer, styles)

    @staticmethod
    def _get_message(record: logging.LogRecord) -> str | None:
        if record.msg is None:
            return None
        return record.getMessage()

    @staticmethod
    def _write_timestamp(writer: TextIO, styles: Styles, now: datetime) -> None:
        styles.use_timestamp_style(writer)
        writer.write(f"[{now.hour:02d}:{now.minute:02d}:{now.second:02d}] ")

    @staticmethod
    def _write_trace_id(writer: TextIO, styles: Styles) -> None:
        styles.use_trace_id_style(writer)
        short = short_trace_id(trace.get_current_span())
        if short is None:
            writer.write(_NO_TRACE_ID)
        else:
            writer.write(f"#{short} ")

    @staticmethod
    def _write_level(writer: TextIO, styles: Styles, level: int) -> None:
        styles.use_level_style(writer)
        writer.write(format_level(level))

    @staticmethod
    def _write_separator(writer: TextIO, styles: Styles) -> None:
        styles.use_message_style(writer)
        writer.write(": ")

    def _write_exception(
        self, writer: TextIO, styles: Styles, record: logging.LogRecord, wrote_message: bool
    ) -> None:
        if not _has_exception(record):
            return

        if not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)  # type: ignore[arg-type]

        styles.use_message_style(writer)
        if wrote_message:
            writer.write(" ")
        writer.write(record.exc_text)

    @staticmethod
    def _write_end_of_line(writer: TextIO, styles: Styles) -> None:
        styles.reset_style(writer)
        writer.write("\n")


def _has_exception(record: logging.LogRecord) -> bool:
    exc_info = record.exc_info
    return bool(exc_info) and exc_info[1] is not None  # type: ignore[index]


__all__ = ["PrettyConsoleFormatter", "format_level"]
