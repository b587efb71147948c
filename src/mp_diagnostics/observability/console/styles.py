"""Observability console – Styles, ConsoleContext and the two themes.

A :class:`Styles` holds the escape sequences for the four segments of a
console line at one severity.  Themes map a level number to a ``Styles``.
All values are immutable; a theme is chosen, never edited.
"""
from __future__ import annotations

import dataclasses
from typing import Protocol, TextIO

from mp_diagnostics.observability.console import ansi
from mp_diagnostics.observability.console.ansi import sgr
from mp_diagnostics.observability.logging.levels import LogLevel


@dataclasses.dataclass(frozen=True, slots=True)
class ConsoleContext:
    """What a self-rendering message needs to know about the console.

    ``default_code`` restores the message style of the current line; it is
    ``None`` when color is disabled.
    """

    default_code: str | None = None

    @property
    def is_color_enabled(self) -> bool:
        return self.default_code is not None


@dataclasses.dataclass(frozen=True, slots=True)
class Styles:
    timestamp: str | None = None
    trace_id: str | None = None
    level: str | None = None
    message: str | None = None
    message_context: ConsoleContext = ConsoleContext()
    default: str | None = None

    def use_timestamp_style(self, writer: TextIO) -> None:
        _write(writer, self.timestamp)

    def use_trace_id_style(self, writer: TextIO) -> None:
        _write(writer, self.trace_id)

    def use_level_style(self, writer: TextIO) -> None:
        _write(writer, self.level)

    def use_message_style(self, writer: TextIO) -> None:
        _write(writer, self.message)

    def reset_style(self, writer: TextIO) -> None:
        _write(writer, self.default)


def _write(writer: TextIO, code: str | None) -> None:
    if code:
        writer.write(code)


class Theme(Protocol):
    def get_styles(self, level: int) -> Styles: ...


class MonoTheme:
    """Theme with no styling at all."""

    STYLES = Styles()

    def get_styles(self, level: int) -> Styles:  # noqa: ARG002
        return self.STYLES


def _color_styles(
    timestamp: str, trace_id: str, level: str, message: str | None, reset_to_message: str
) -> Styles:
    return Styles(
        timestamp=timestamp,
        trace_id=trace_id,
        level=level,
        message=message,
        message_context=ConsoleContext(reset_to_message),
        default=ansi.RESET_STYLE,
    )


_TIMESTAMP = sgr(ansi.RESET, ansi.FORE_WHITE, ansi.fore_256(242))
_TRACE_ID = sgr(ansi.FORE_CYAN, ansi.fore_256(31))


class ColorTheme:
    """ANSI color theme.

    Verbose covers TRACE, DEBUG, NONE and any level number outside the enum.
    The message segment keeps the level style except for ERROR and CRITICAL.
    """

    VERBOSE = _color_styles(
        sgr(ansi.RESET, ansi.FORE_BRIGHT_BLACK, ansi.fore_256(239)),
        sgr(ansi.FORE_BLUE, ansi.fore_256(23)),
        sgr(ansi.FORE_BRIGHT_BLACK, ansi.fore_256(243)),
        None,
        sgr(ansi.RESET, ansi.FORE_BRIGHT_BLACK, ansi.fore_256(243)),
    )
    INFORMATION = _color_styles(
        _TIMESTAMP,
        _TRACE_ID,
        sgr(ansi.FORE_DEFAULT),
        None,
        sgr(ansi.RESET),
    )
    WARNING = _color_styles(
        _TIMESTAMP,
        _TRACE_ID,
        sgr(ansi.FORE_YELLOW),
        None,
        sgr(ansi.RESET, ansi.FORE_YELLOW),
    )
    ERROR = _color_styles(
        _TIMESTAMP,
        _TRACE_ID,
        sgr(ansi.FORE_BRIGHT_WHITE, ansi.BACK_RED, ansi.BOLD),
        sgr(ansi.FORE_BRIGHT_RED, ansi.BACK_DEFAULT),
        sgr(ansi.RESET, ansi.FORE_BRIGHT_RED, ansi.BOLD),
    )
    CRITICAL = _color_styles(
        _TIMESTAMP,
        _TRACE_ID,
        sgr(ansi.FORE_BRIGHT_WHITE, ansi.BACK_MAGENTA, ansi.BOLD),
        sgr(ansi.FORE_BRIGHT_MAGENTA, ansi.BACK_DEFAULT),
        sgr(ansi.RESET, ansi.FORE_BRIGHT_MAGENTA, ansi.BOLD),
    )

    def get_styles(self, level: int) -> Styles:
        if level == LogLevel.INFORMATION:
            return self.INFORMATION
        if level == LogLevel.WARNING:
            return self.WARNING
        if level == LogLevel.ERROR:
            return self.ERROR
        if level == LogLevel.CRITICAL:
            return self.CRITICAL
        return self.VERBOSE


__all__ = ["ColorTheme", "ConsoleContext", "MonoTheme", "Styles", "Theme"]
