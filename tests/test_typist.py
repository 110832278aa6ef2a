import io

from autotyper.ansi import HIGHLIGHT, RESET
from autotyper.typist import type_as_human


def test_zero_delay_writes_plain_text_at_once() -> None:
    out = io.StringIO()
    sleeps: list[float] = []
    type_as_human("ls -la", out, 0, sleep=sleeps.append)
    assert out.getvalue() == "ls -la"
    assert sleeps == []


def test_first_word_is_highlighted_and_reset_at_space() -> None:
    out = io.StringIO()
    type_as_human("ls -la", out, 25, sleep=lambda _: None)
    assert out.getvalue() == f"{HIGHLIGHT}ls{RESET} -la{RESET}"


def test_color_is_reset_at_every_space() -> None:
    out = io.StringIO()
    type_as_human("a b c", out, 10, sleep=lambda _: None)
    assert out.getvalue() == f"{HIGHLIGHT}a{RESET} b{RESET} c{RESET}"


def test_sleeps_once_per_character() -> None:
    sleeps: list[float] = []
    type_as_human("echo hi", io.StringIO(), 40, sleep=sleeps.append)
    assert sleeps == [0.04] * len("echo hi")


def test_empty_text_only_emits_color_codes() -> None:
    out = io.StringIO()
    sleeps: list[float] = []
    type_as_human("", out, 40, sleep=sleeps.append)
    assert out.getvalue() == f"{HIGHLIGHT}{RESET}"
    assert sleeps == []


class _FlushCounter(io.StringIO):
    def __init__(self) -> None:
        super().__init__()
        self.flushes = 0
        self.seen_at_flush: list[str] = []

    def flush(self) -> None:
        self.flushes += 1
        self.seen_at_flush.append(self.getvalue())
        super().flush()


def test_each_character_is_flushed_before_sleeping() -> None:
    out = _FlushCounter()
    visible_at_sleep: list[str] = []
    type_as_human("ls -l", out, 10, sleep=lambda _: visible_at_sleep.append(out.seen_at_flush[-1]))
    assert out.flushes == len("ls -l") + 1
    assert visible_at_sleep == [
        f"{HIGHLIGHT}l",
        f"{HIGHLIGHT}ls",
        f"{HIGHLIGHT}ls{RESET} ",
        f"{HIGHLIGHT}ls{RESET} -",
        f"{HIGHLIGHT}ls{RESET} -l",
    ]
