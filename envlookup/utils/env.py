"""Environment variable utilities."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping

from dotenv import load_dotenv


def get_env_var(
    name: str,
    default: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Retrieve an optional environment variable with a default value.

    An empty value counts as unset.
    
    Args:
        name: Environment variable name
        default: Default value if variable is not set
        environ: Mapping to read from instead of os.environ
        
    Returns:
        Environment variable value or default
    """
    source = os.environ if environ is None else environ
    value = source.get(name)
    if not value:
        return default
    return value


def load_env_file(path: str | Path | None = None, override: bool = False) -> bool:
    """Load variables from a .env file into os.environ.

    Args:
        path: File to load. If None, python-dotenv searches for a .env file.
        override: Whether values from the file replace existing variables

    Returns:
        True if the file defined any variables
    """
    return load_dotenv(dotenv_path=path, override=override)
