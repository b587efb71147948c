"""Observability console – pretty single-line console log output."""
from mp_diagnostics.observability.console.factory import PrettyConsoleLoggerFactory
from mp_diagnostics.observability.console.formattable import ConsoleFormattable, StringConsoleFormattable
from mp_diagnostics.observability.console.formatter import PrettyConsoleFormatter, format_level
from mp_diagnostics.observability.console.handler import PrettyConsoleHandler
from mp_diagnostics.observability.console.info import is_redirected
from mp_diagnostics.observability.console.options import ColorBehavior, PrettyConsoleFormatterOptions
from mp_diagnostics.observability.console.styles import ColorTheme, ConsoleContext, MonoTheme, Styles, Theme

__all__ = [
    "ColorBehavior",
    "ColorTheme",
    "ConsoleContext",
    "ConsoleFormattable",
    "MonoTheme",
    "PrettyConsoleFormatter",
    "PrettyConsoleFormatterOptions",
    "PrettyConsoleHandler",
    "PrettyConsoleLoggerFactory",
    "StringConsoleFormattable",
    "Styles",
    "Theme",
    "format_level",
    "is_redirected",
]
