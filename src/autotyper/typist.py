"""Human-paced typing of a single command line."""

from __future__ import annotations

import time
from typing import Callable, TextIO

from .ansi import HIGHLIGHT, RESET


def type_as_human(
    text: str,
    out: TextIO,
    delay_ms: int,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Write `text` one character at a time with `delay_ms` between characters.

    The first word (the program name) is highlighted; the color is reset at
    every space and once more after the last character. A delay of zero
    writes the text in one go without any color codes.
    """
    if delay_ms == 0:
        out.write(text)
        out.flush()
        return

    delay = delay_ms / 1000
    out.write(HIGHLIGHT)
    for char in text:
        if char == " ":
            out.write(RESET)
        out.write(char)
        out.flush()
        sleep(delay)
    out.write(RESET)
    out.flush()
