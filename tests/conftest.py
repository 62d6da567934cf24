"""Shared fixtures for envlookup tests."""
import sys
from pathlib import Path

# Add parent directory to path so the envlookup package can be imported
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest
from loguru import logger


@pytest.fixture
def error_lines():
    """Collect the messages logged at ERROR level during a test."""
    lines: list[str] = []
    handler_id = logger.add(lambda message: lines.append(message.rstrip("\n")), format="{message}", level="ERROR")
    yield lines
    logger.remove(handler_id)
