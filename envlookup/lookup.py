"""Direct lookup of typed environment variables.

Two flavours are provided for every type:

- ``lookup_*`` functions return a LookupResult and leave the decision
  about failures to the caller.
- ``get_*`` functions return the plain value. A malformed environment
  value is logged and terminates the process with exit status 1. A
  malformed default for time or URL values raises MalformedDefaultError.

Unset and empty variables always resolve to the default.
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any, Callable, Mapping
from urllib.parse import SplitResult

from .schemas.errors import (
    EnvError,
    ErrorKind,
    LookupResult,
    MalformedDefaultError,
)
from .utils.diagnostics import fail, report
from .utils.env import get_env_var
from .utils.parsing import parse_duration, parse_int, parse_time, parse_url


def _lookup(
    name: str,
    default: Any,
    parse: Callable[[str], Any],
    environ: Mapping[str, str] | None,
) -> LookupResult:
    raw = get_env_var(name, environ=environ)
    if raw is None:
        return LookupResult(name=name, value=default)
    try:
        return LookupResult(name=name, value=parse(raw))
    except ValueError as e:
        error = EnvError(kind=ErrorKind.MALFORMED_VALUE, name=name, value=raw, cause=str(e))
        return LookupResult(name=name, error=error)


def _lookup_with_parsed_default(
    name: str,
    value: str,
    parse: Callable[[str], Any],
    environ: Mapping[str, str] | None,
) -> LookupResult:
    try:
        default = parse(value)
    except ValueError as e:
        error = EnvError(kind=ErrorKind.MALFORMED_DEFAULT, name=name, value=value, cause=str(e))
        return LookupResult(name=name, error=error)
    return _lookup(name, default, parse, environ)


def lookup_int(name: str, default: int, environ: Mapping[str, str] | None = None) -> LookupResult:
    """Resolve a base-10 integer variable."""
    return _lookup(name, default, parse_int, environ)


def lookup_duration(
    name: str, default: timedelta, environ: Mapping[str, str] | None = None
) -> LookupResult:
    """Resolve a duration variable such as "5s" or "1h30m"."""
    return _lookup(name, default, parse_duration, environ)


def lookup_time(
    name: str, fmt: str, value: str, environ: Mapping[str, str] | None = None
) -> LookupResult:
    """Resolve a timestamp variable using a strptime format.

    Args:
        name: Environment variable name
        fmt: strptime format applied to both the default and the variable
        value: Default timestamp as a string in ``fmt``
        environ: Mapping to read from instead of os.environ

    Returns:
        A result holding a datetime. A default that does not match ``fmt``
        yields a MALFORMED_DEFAULT error whatever the environment holds.
    """
    return _lookup_with_parsed_default(name, value, lambda s: parse_time(fmt, s), environ)


def lookup_url(name: str, value: str, environ: Mapping[str, str] | None = None) -> LookupResult:
    """Resolve a URL variable. ``value`` is the default URL string."""
    return _lookup_with_parsed_default(name, value, parse_url, environ)


def lookup_string(name: str, default: str, environ: Mapping[str, str] | None = None) -> LookupResult:
    return LookupResult(name=name, value=get_env_var(name, default, environ=environ))


def _value_or_exit(result: LookupResult) -> Any:
    if result.error is None:
        return result.value
    if result.error.kind is ErrorKind.MALFORMED_DEFAULT:
        raise MalformedDefaultError(result.error)
    report(result.error)
    fail()


def get_int(name: str, default: int) -> int:
    """Return the named variable as an int, or ``default`` if unset.

    Logs a diagnostic and exits with status 1 if the value is not an
    integer.
    """
    return _value_or_exit(lookup_int(name, default))


def get_duration(name: str, default: timedelta) -> timedelta:
    """Return the named variable as a timedelta, or ``default`` if unset.

    Logs a diagnostic and exits with status 1 if the value is not a
    duration.
    """
    return _value_or_exit(lookup_duration(name, default))


def get_time(name: str, fmt: str, value: str) -> datetime:
    """Return the named variable parsed with ``fmt``.

    If the variable is unset, returns ``value`` parsed with ``fmt``.

    Raises:
        MalformedDefaultError: If ``value`` does not match ``fmt``. This
            is checked before the environment is read.
    """
    return _value_or_exit(lookup_time(name, fmt, value))


def get_url(name: str, value: str) -> SplitResult:
    """Return the named variable as a split URL.

    If the variable is unset, returns ``value`` parsed as a URL.

    Raises:
        MalformedDefaultError: If ``value`` is not a valid URL
    """
    return _value_or_exit(lookup_url(name, value))


def get_string(name: str, default: str) -> str:
    """Return the named variable, or ``default`` if unset or empty."""
    return lookup_string(name, default).value
