"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

from .errors import ConfigurationError

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str = "WARNING") -> None:
    """Configure process-level logging once per level."""
    global _CONFIGURED_LEVEL
    level = level.upper()
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    try:
        logger.add(
            sys.stderr,
            level=level,
            format=_FORMAT,
            backtrace=False,
            diagnose=False,
        )
    except ValueError as exc:
        logger.add(sys.stderr, level="WARNING", format=_FORMAT, backtrace=False, diagnose=False)
        _CONFIGURED_LEVEL = "WARNING"
        raise ConfigurationError(f"invalid log level: {level}") from exc
    _CONFIGURED_LEVEL = level
