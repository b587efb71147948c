"""Observability console – terminal detection."""
from __future__ import annotations

import sys
from typing import TextIO


def is_redirected(stream: TextIO | None = None) -> bool:
    """Return ``True`` unless *stream* (default: stderr) is an interactive terminal."""
    if stream is None:
        stream = sys.stderr
    try:
        return not stream.isatty()
    except (AttributeError, ValueError, OSError):
        return True


__all__ = ["is_redirected"]
