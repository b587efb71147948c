"""Observability console – PrettyConsoleFormatterOptions."""
from __future__ import annotations

import dataclasses
from enum import Enum


class ColorBehavior(str, Enum):
    """Whether console output is colorized.

    ``AUTO`` colorizes unless the output stream is redirected.
    """

    AUTO = "auto"
    ENABLED = "enabled"
    DISABLED = "disabled"


@dataclasses.dataclass
class PrettyConsoleFormatterOptions:
    color_behavior: ColorBehavior = ColorBehavior.AUTO
    use_utc_timestamp: bool = False


__all__ = ["ColorBehavior", "PrettyConsoleFormatterOptions"]
