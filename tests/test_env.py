"""Tests for raw environment access and logging setup."""
import os
import sys
from unittest.mock import patch

from loguru import logger

from envlookup.config.logging import configure_logging
from envlookup.utils.env import get_env_var, load_env_file


def test_get_env_var_treats_empty_as_unset():
    environ = {"SET": "value", "EMPTY": ""}
    assert get_env_var("SET", environ=environ) == "value"
    assert get_env_var("EMPTY", "fallback", environ=environ) == "fallback"
    assert get_env_var("MISSING", environ=environ) is None


def test_load_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ENVLOOKUP_TEST_PORT=7000\n")

    with patch.dict(os.environ, {}, clear=True):
        assert load_env_file(env_file) is True
        assert os.environ["ENVLOOKUP_TEST_PORT"] == "7000"


def test_load_env_file_keeps_existing_values(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("ENVLOOKUP_TEST_PORT=7000\n")

    with patch.dict(os.environ, {"ENVLOOKUP_TEST_PORT": "1"}, clear=True):
        load_env_file(env_file)
        assert os.environ["ENVLOOKUP_TEST_PORT"] == "1"
        load_env_file(env_file, override=True)
        assert os.environ["ENVLOOKUP_TEST_PORT"] == "7000"


def test_configure_logging_writes_to_stderr(capsys):
    try:
        configure_logging("ERROR", colorize=False)
        logger.warning("hidden")
        logger.error("PORT bad")
        err = capsys.readouterr().err
    finally:
        logger.remove()
        logger.add(sys.stderr)

    assert "PORT bad" in err
    assert "hidden" not in err
