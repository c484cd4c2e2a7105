"""Runtime logging helpers."""

from __future__ import annotations

import sys

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"
_CONFIGURED_LEVEL: str | None = None


def configure_logging(level: str | None = None) -> None:
    """Configure process-level logging once."""
    global _CONFIGURED_LEVEL

    if level is None:
        from minishell.config import get_settings

        level = get_settings().log_level
    level = level.upper()
    if level == _CONFIGURED_LEVEL:
        return

    logger.remove()
    logger.add(
        sys.stderr,
        level=level,
        format=_FORMAT,
        backtrace=False,
        diagnose=False,
    )
    _CONFIGURED_LEVEL = level
