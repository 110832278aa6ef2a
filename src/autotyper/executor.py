"""Running typed commands and clearing the screen."""

from __future__ import annotations

import subprocess
import sys
from typing import IO, TextIO, cast

from loguru import logger

from .errors import ClearScreenError, CommandFailedError, ExecutionError


def split_command(command: str) -> tuple[str, list[str]]:
    """Split on single spaces. No quoting or escaping is understood."""
    program, *args = command.split(" ")
    if not program:
        raise ExecutionError("no command")
    return program, args


def _fileno(stream: TextIO) -> int | None:
    try:
        return stream.fileno()
    except (AttributeError, OSError):
        return None


def _run(argv: list[str], out: TextIO) -> int:
    out.flush()
    if _fileno(out) is not None:
        # Child writes to the terminal directly so it still sees a TTY.
        return subprocess.run(argv, stdout=out).returncode  # noqa: S603

    with subprocess.Popen(  # noqa: S603
        argv, stdout=subprocess.PIPE, text=True, encoding="utf-8", errors="replace"
    ) as process:
        for line in cast(IO[str], process.stdout):
            out.write(line)
            out.flush()
    return process.returncode


def execute_command(command: str, out: TextIO) -> None:
    """Run `command` and stream its standard output into `out`."""
    program, args = split_command(command)
    logger.debug("executing {} {}", program, args)
    try:
        returncode = _run([program, *args], out)
    except OSError as exc:
        raise ExecutionError(f"exec: {program!r}: {exc.strerror or exc!s}") from exc
    except (subprocess.SubprocessError, ValueError) as exc:
        raise ExecutionError(f"exec: {program!r}: {exc!s}") from exc
    if returncode != 0:
        raise CommandFailedError(command, returncode)


def clear_screen(out: TextIO) -> None:
    """Clear the terminal with the platform's own clear command."""
    if sys.platform == "win32":
        argv = ["cmd", "/c", "cls"]
    else:
        argv = ["sh", "-c", "clear"]
    try:
        returncode = _run(argv, out)
    except (OSError, subprocess.SubprocessError, ValueError) as exc:
        raise ClearScreenError(f"clear screen: {exc!s}") from exc
    if returncode != 0:
        raise ClearScreenError(f"clear screen: exit status {returncode}")
