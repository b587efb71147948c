"""Observability console – ANSI SGR escape sequence catalog.

Sequences are ``BEGIN + param [+ AND + param ...] + END``; use :func:`sgr`
to assemble one.
"""
from __future__ import annotations

BEGIN = "\x1b["
AND = ";"
END = "m"

RESET = "0"
BOLD = "1"
DIM, NORMAL = "2", "22"
ITALIC, NO_ITALIC = "3", "23"
UNDERLINE, NO_UNDERLINE = "4", "24"
BLINK, NO_BLINK = "5", "25"
REVERSE, NO_REVERSE = "7", "27"
HIDDEN, NO_HIDDEN = "8", "28"
STRIKE, NO_STRIKE = "9", "29"

FORE_BLACK, BACK_BLACK = "30", "40"
FORE_RED, BACK_RED = "31", "41"
FORE_GREEN, BACK_GREEN = "32", "42"
FORE_YELLOW, BACK_YELLOW = "33", "43"
FORE_BLUE, BACK_BLUE = "34", "44"
FORE_MAGENTA, BACK_MAGENTA = "35", "45"
FORE_CYAN, BACK_CYAN = "36", "46"
FORE_WHITE, BACK_WHITE = "37", "47"

FORE_BRIGHT_BLACK, BACK_BRIGHT_BLACK = "90", "100"
FORE_BRIGHT_RED, BACK_BRIGHT_RED = "91", "101"
FORE_BRIGHT_GREEN, BACK_BRIGHT_GREEN = "92", "102"
FORE_BRIGHT_YELLOW, BACK_BRIGHT_YELLOW = "93", "103"
FORE_BRIGHT_BLUE, BACK_BRIGHT_BLUE = "94", "104"
FORE_BRIGHT_MAGENTA, BACK_BRIGHT_MAGENTA = "95", "105"
FORE_BRIGHT_CYAN, BACK_BRIGHT_CYAN = "96", "106"
FORE_BRIGHT_WHITE, BACK_BRIGHT_WHITE = "97", "107"

# followed by <n> for 256 colors, or <r>;<g>;<b> for 24-bit color
FORE_256, BACK_256 = "38;5;", "48;5;"
FORE_RGB, BACK_RGB = "38;2;", "48;2;"

FORE_DEFAULT, BACK_DEFAULT = "39", "49"


def sgr(*params: str) -> str:
    """Assemble a Select Graphic Rendition sequence from *params*."""
    return BEGIN + AND.join(params) + END


def fore_256(color: int) -> str:
    return FORE_256 + str(color)


def back_256(color: int) -> str:
    return BACK_256 + str(color)


RESET_STYLE = sgr(RESET)
