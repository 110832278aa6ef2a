"""Simulated shell prompts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from loguru import logger

from .ansi import BLUE, GREEN, RESET


class ShellStyle(str, Enum):
    """Prompt flavours autotyper can imitate."""

    PS = "ps"
    CMD = "cmd"
    BASH = "bash"

    @classmethod
    def parse(cls, name: str | None) -> ShellStyle:
        """Resolve a shell name, falling back to PowerShell for anything unknown."""
        normalized = (name or "").strip().lower()
        for style in cls:
            if style.value == normalized:
                return style
        if normalized:
            logger.warning("unknown shell {!r}, using ps", name)
        return cls.PS


def default_path(shell: ShellStyle) -> str:
    if shell is ShellStyle.BASH:
        return "~"
    return "C:\\"


@dataclass(frozen=True)
class Prompt:
    """Everything needed to draw the prompt; fixed for the whole run."""

    username: str
    hostname: str
    path: str
    shell: ShellStyle = ShellStyle.PS

    @classmethod
    def create(cls, username: str, hostname: str, path: str | None, shell: ShellStyle) -> Prompt:
        return cls(username=username, hostname=hostname, path=path or default_path(shell), shell=shell)


def render_prompt(prompt: Prompt) -> str:
    if prompt.shell is ShellStyle.CMD:
        return f"{prompt.path}> "
    if prompt.shell is ShellStyle.BASH:
        return f"{GREEN}{prompt.username}@{prompt.hostname}{RESET}:{BLUE}{prompt.path}{RESET}$ "
    return f"PS {prompt.path}> "


def print_prompt(prompt: Prompt, out: TextIO) -> None:
    out.write(render_prompt(prompt))
    out.flush()
