"""Typed configuration values from environment variables."""
from __future__ import annotations

from .lookup import (
    get_duration,
    get_int,
    get_string,
    get_time,
    get_url,
    lookup_duration,
    lookup_int,
    lookup_string,
    lookup_time,
    lookup_url,
)
from .registry import Cell, EnvRegistry
from .schemas.errors import (
    EnvError,
    EnvParseError,
    ErrorKind,
    LookupResult,
    MalformedDefaultError,
    MalformedValueError,
)

__all__ = [
    "get_duration",
    "get_int",
    "get_string",
    "get_time",
    "get_url",
    "lookup_duration",
    "lookup_int",
    "lookup_string",
    "lookup_time",
    "lookup_url",
    "Cell",
    "EnvRegistry",
    "EnvError",
    "EnvParseError",
    "ErrorKind",
    "LookupResult",
    "MalformedDefaultError",
    "MalformedValueError",
]
