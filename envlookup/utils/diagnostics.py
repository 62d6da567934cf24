"""Reporting of parse failures."""
from __future__ import annotations

import sys
from typing import NoReturn

from loguru import logger

from ..schemas.errors import EnvError

# Exit status used whenever a malformed variable stops the process
EXIT_CODE = 1


def report(error: EnvError) -> None:
    """Log the single diagnostic line for a failed variable."""
    logger.error(str(error))


def fail() -> NoReturn:
    sys.exit(EXIT_CODE)
