"""Application-level exception types for autotyper."""

from __future__ import annotations


class AutotyperError(Exception):
    """Base exception for autotyper."""


class ConfigurationError(AutotyperError):
    """Raised when settings or the config file are invalid."""


class InputError(AutotyperError):
    """Raised when the command input cannot be acquired."""


class ExecutionError(AutotyperError):
    """Raised when a typed command cannot be run."""


class CommandFailedError(ExecutionError):
    """Raised when a command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int) -> None:
        super().__init__(f"exit status {returncode}")
        self.command = command
        self.returncode = returncode


class ClearScreenError(AutotyperError):
    """Raised when the terminal could not be cleared."""
