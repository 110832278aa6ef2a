"""Acquiring the block of commands to type."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from .errors import InputError


def stdin_is_piped(stream: TextIO | None = None) -> bool:
    """Return True when standard input is a pipe or a redirected file."""
    stream = stream or sys.stdin
    try:
        return not stream.isatty()
    except (AttributeError, ValueError):
        return False


def read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"cannot read input file {path}: {exc!s}") from exc


def read_stdin(stream: TextIO | None = None) -> str:
    stream = stream or sys.stdin
    try:
        return stream.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputError(f"cannot read standard input: {exc!s}") from exc


def eof_keys() -> str:
    return "CTRL+Z" if sys.platform == "win32" else "CTRL+D"


def read_interactive(stream: TextIO | None = None, hint: TextIO | None = None) -> str:
    """Let the user type the commands, one per line, until end of input."""
    stream = stream or sys.stdin
    hint = hint or sys.stderr
    hint.write(f"Please enter the input text. Press {eof_keys()} to finish.\n")
    hint.flush()
    return "\n".join(line.rstrip("\r\n") for line in stream)


def split_commands(text: str) -> list[str]:
    """Turn a block of text into the ordered list of commands to play.

    Windows line endings are normalized and trailing newlines dropped; blank
    lines in the middle are kept so the run matches the input line for line.
    """
    text = text.replace("\r\n", "\n").rstrip("\n")
    if not text.strip():
        return []
    return text.split("\n")
