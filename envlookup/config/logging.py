"""Logging configuration for scripts built on envlookup."""
from __future__ import annotations

import sys

from loguru import logger

LOG_FORMAT = "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <level>{message}</level>"


def configure_logging(level: str = "INFO", colorize: bool | None = None) -> None:
    """Configure loguru to write diagnostics to stderr.

    Replaces loguru's default handler. The library itself never touches
    sinks, so applications that configure loguru their own way keep
    their setup.

    Args:
        level: Minimum level to emit
        colorize: Force or disable colors. None lets loguru decide.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format=LOG_FORMAT,
        level=level,
        colorize=colorize,
    )
