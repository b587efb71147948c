"""Observability console – self-rendering message values."""
from __future__ import annotations

import dataclasses
from typing import Protocol, TextIO, runtime_checkable

from mp_diagnostics.observability.console.styles import ConsoleContext


@runtime_checkable
class ConsoleFormattable(Protocol):
    """A log message value that renders itself onto a console.

    ``write_console`` returns ``True`` when it wrote any text.  When
    ``console.is_color_enabled`` it may emit its own styling;
    ``console.default_code`` returns to the message style of the line.
    """

    def write_console(self, writer: TextIO, console: ConsoleContext) -> bool: ...


@dataclasses.dataclass(frozen=True, slots=True)
class StringConsoleFormattable:
    """Plain text message; writes nothing when empty."""

    content: str | None = None

    def write_console(self, writer: TextIO, console: ConsoleContext) -> bool:  # noqa: ARG002
        if not self.content:
            return False
        writer.write(self.content)
        return True


__all__ = ["ConsoleFormattable", "StringConsoleFormattable"]
