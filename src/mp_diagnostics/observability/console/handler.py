"""Observability console – PrettyConsoleHandler."""
from __future__ import annotations

import io
import logging
import sys
from typing import TextIO

from mp_diagnostics.config.options import OptionsMonitor
from mp_diagnostics.observability.console.formatter import PrettyConsoleFormatter
from mp_diagnostics.observability.console.options import PrettyConsoleFormatterOptions


class PrettyConsoleHandler(logging.StreamHandler):  # type: ignore[type-arg]
    """``StreamHandler`` that writes through a :class:`PrettyConsoleFormatter`.

    *options* may be an :class:`OptionsMonitor`, a plain options value, or
    ``None`` for the defaults.  Records the formatter skips produce no output.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        options: OptionsMonitor[PrettyConsoleFormatterOptions] | PrettyConsoleFormatterOptions | None = None,
    ) -> None:
        if stream is None:
            stream = sys.stderr
        super().__init__(stream)
        if not isinstance(options, OptionsMonitor):
            options = OptionsMonitor(options if options is not None else PrettyConsoleFormatterOptions())
        self.monitor: OptionsMonitor[PrettyConsoleFormatterOptions] = options
        self.pretty_formatter = PrettyConsoleFormatter(options, stream=stream)
        self.setFormatter(self.pretty_formatter)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            buffer = io.StringIO()
            self.pretty_formatter.write(record, buffer)
            text = buffer.getvalue()
            if text:
                self.stream.write(text)
                self.flush()
        except RecursionError:
            raise
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.pretty_formatter.close()
        super().close()


__all__ = ["PrettyConsoleHandler"]
