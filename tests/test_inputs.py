import io
from pathlib import Path

import pytest

from autotyper.errors import InputError
from autotyper.inputs import read_file, read_interactive, read_stdin, split_commands, stdin_is_piped


def test_split_commands_normalizes_windows_line_endings() -> None:
    assert split_commands("ls\r\npwd\r\n") == ["ls", "pwd"]


def test_split_commands_drops_trailing_newlines_only() -> None:
    assert split_commands("ls\n\npwd\n\n\n") == ["ls", "", "pwd"]


@pytest.mark.parametrize("text", ["", "\n", "\r\n\r\n", "   "])
def test_split_commands_blank_text_has_no_commands(text: str) -> None:
    assert split_commands(text) == []


def test_single_line_is_one_command() -> None:
    assert split_commands("ping one.one.one.one") == ["ping one.one.one.one"]


def test_read_file(tmp_path: Path) -> None:
    commands = tmp_path / "commands.txt"
    commands.write_text("echo one\necho two\n", encoding="utf-8")
    assert split_commands(read_file(commands)) == ["echo one", "echo two"]


def test_read_missing_file_raises_input_error(tmp_path: Path) -> None:
    with pytest.raises(InputError, match="cannot read input file"):
        read_file(tmp_path / "missing.txt")


def test_read_stdin_returns_everything() -> None:
    assert read_stdin(io.StringIO("ls\npwd\n")) == "ls\npwd\n"


def test_read_interactive_collects_lines_and_prints_hint() -> None:
    hint = io.StringIO()
    text = read_interactive(io.StringIO("ls\r\npwd\n"), hint)
    assert text == "ls\npwd"
    assert hint.getvalue().startswith("Please enter the input text. Press CTRL+")


class _Terminal(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_stdin_is_piped() -> None:
    assert stdin_is_piped(io.StringIO("ls")) is True
    assert stdin_is_piped(_Terminal()) is False
