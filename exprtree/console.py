"""Console decorations: centred dividers and boxed banners."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

CONSOLE_WIDTH = 80
DIV_CHAR = "-"
BAN_CORN_CHAR = "@"
BAN_VERT_CHAR = "|"
BAN_HORZ_CHAR = "-"
BAN_FILL_CHAR = " "


def _centre(message: str, width: int, fill: str) -> str:
    """Centre message in width, giving the extra fill character to the left."""
    odd = len(message) % 2
    space = max(width - len(message), 0) // 2
    return fill * (space + odd) + message + fill * space


def divider(message: Optional[str] = None, file: Optional[TextIO] = None) -> None:
    """Write a full-width rule, with message centred in it if one is given."""
    out = sys.stdout if file is None else file
    if message is None:
        out.write(DIV_CHAR * CONSOLE_WIDTH + "\n")
        return
    out.write(_centre(message, CONSOLE_WIDTH, DIV_CHAR) + "\n")


def banner(message: Optional[str] = None, file: Optional[TextIO] = None) -> None:
    """Write a three-line box across the console, with message centred inside."""
    out = sys.stdout if file is None else file
    inner = CONSOLE_WIDTH - 2
    edge = BAN_CORN_CHAR + BAN_HORZ_CHAR * inner + BAN_CORN_CHAR + "\n"
    if message is None:
        middle = BAN_FILL_CHAR * inner
    else:
        middle = _centre(message, inner, BAN_FILL_CHAR)
    out.write(edge)
    out.write(BAN_VERT_CHAR + middle + BAN_VERT_CHAR + "\n")
    out.write(edge)