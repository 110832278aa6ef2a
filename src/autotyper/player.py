"""The per-command playback loop."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

from loguru import logger

from .errors import AutotyperError
from .executor import clear_screen, execute_command
from .prompt import Prompt, print_prompt
from .render import Renderer, create_renderer
from .typist import type_as_human


@dataclass(frozen=True)
class PlaybackOptions:
    """Timing in milliseconds and whether to clear between commands."""

    char_delay: int = 75
    pre_delay: int = 500
    post_delay: int = 3500
    clear_between: bool = True


@dataclass(frozen=True)
class PlaybackSummary:
    played: int
    failed: int


class Player:
    """Types, runs and paces a list of commands behind a simulated prompt."""

    def __init__(
        self,
        prompt: Prompt,
        options: PlaybackOptions,
        *,
        out: Optional[TextIO] = None,
        renderer: Optional[Renderer] = None,
        sleep: Callable[[float], None] = time.sleep,
        execute: Callable[[str, TextIO], None] = execute_command,
        clear: Callable[[TextIO], None] = clear_screen,
    ) -> None:
        self.prompt = prompt
        self.options = options
        self.out: TextIO = out or sys.stdout
        self.renderer = renderer or create_renderer()
        self._sleep = sleep
        self._execute = execute
        self._clear = clear

    def run(self, commands: list[str]) -> PlaybackSummary:
        self._clear_screen()
        self._print_prompt()

        failed = 0
        last = len(commands) - 1
        for index, command in enumerate(commands):
            logger.debug("playing command {}/{}: {}", index + 1, len(commands), command)
            self._pause(self.options.pre_delay)

            type_as_human(command, self.out, self.options.char_delay, sleep=self._sleep)
            self.out.write("\n")
            self.out.flush()

            try:
                self._execute(command, self.out)
            except AutotyperError as exc:
                failed += 1
                logger.debug("command {!r} failed: {}", command, exc)
                self.renderer.error(str(exc))

            self._print_prompt()
            self._pause(self.options.post_delay)

            if self.options.clear_between and index != last:
                self._clear_screen()
                self._print_prompt()

        return PlaybackSummary(played=len(commands), failed=failed)

    def _pause(self, delay_ms: int) -> None:
        if delay_ms > 0:
            self._sleep(delay_ms / 1000)

    def _print_prompt(self) -> None:
        print_prompt(self.prompt, self.out)

    def _clear_screen(self) -> None:
        try:
            self._clear(self.out)
        except AutotyperError as exc:
            self.renderer.error(str(exc))
