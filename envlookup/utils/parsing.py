"""String parsers for the supported variable types.

Every parser takes the raw string and raises ValueError with a readable
message when the input is malformed.
"""
from __future__ import annotations

import re
from datetime import datetime, timedelta
from decimal import Decimal
from urllib.parse import SplitResult, urlsplit

_INT_RE = re.compile(r"[+-]?[0-9]+")

_DURATION_COMPONENT_RE = re.compile(r"(?P<number>[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?P<unit>[^0-9.]*)")

# Nanoseconds per unit
_DURATION_UNITS = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")

_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.-]*:")

_BAD_HOST_CHARS = frozenset(" <>\"`{}|\\^")


def parse_int(s: str) -> int:
    """Parse a base-10 integer with an optional sign."""
    if not _INT_RE.fullmatch(s):
        raise ValueError(f'parsing "{s}": invalid syntax')
    return int(s)


def parse_duration(s: str) -> timedelta:
    """Parse a duration expression such as "300ms", "-1.5h" or "2h45m".

    Valid units are "ns", "us" (or "µs"), "ms", "s", "m" and "h". A bare
    "0" needs no unit. Precision below one microsecond is truncated.

    Args:
        s: Duration expression

    Returns:
        The duration as a timedelta

    Raises:
        ValueError: If the expression is malformed
    """
    rest = s
    sign = 1
    if rest[:1] in ("+", "-"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f'invalid duration "{s}"')

    total_ns = Decimal(0)
    pos = 0
    while pos < len(rest):
        match = _DURATION_COMPONENT_RE.match(rest, pos)
        if match is None:
            raise ValueError(f'invalid duration "{s}"')
        unit = match.group("unit")
        if not unit:
            raise ValueError(f'missing unit in duration "{s}"')
        if unit not in _DURATION_UNITS:
            raise ValueError(f'unknown unit "{unit}" in duration "{s}"')
        total_ns += Decimal(match.group("number")) * _DURATION_UNITS[unit]
        pos = match.end()

    try:
        return timedelta(microseconds=sign * int(total_ns / 1000))
    except OverflowError as e:
        raise ValueError(f'invalid duration "{s}"') from e


def parse_time(fmt: str, s: str) -> datetime:
    """Parse a timestamp with a strptime format."""
    return datetime.strptime(s, fmt)


def parse_url(s: str) -> SplitResult:
    """Parse an absolute or relative URL.

    Args:
        s: URL string

    Returns:
        The split URL components

    Raises:
        ValueError: On control characters, bad percent escapes, a missing
            scheme, a colon in a relative first segment, a malformed host
            or a non-numeric port
    """
    if any(ord(c) < 0x20 or ord(c) == 0x7F for c in s):
        raise ValueError(f'parse "{s}": invalid control character in URL')
    bad_escape = _BAD_ESCAPE_RE.search(s)
    if bad_escape:
        escape = s[bad_escape.start():bad_escape.start() + 3]
        raise ValueError(f'parse "{s}": invalid URL escape "{escape}"')
    if s.startswith(":"):
        raise ValueError(f'parse "{s}": missing protocol scheme')
    if not _SCHEME_RE.match(s) and not s.startswith("/"):
        first_segment = re.split(r"[/?#]", s, maxsplit=1)[0]
        if ":" in first_segment:
            raise ValueError(f'parse "{s}": first path segment in URL cannot contain colon')

    try:
        parts = urlsplit(s)
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise ValueError(f'parse "{s}": {e}') from e
    host = parts.netloc.rpartition("@")[2]
    for c in host:
        if c in _BAD_HOST_CHARS:
            raise ValueError(f'parse "{s}": invalid character "{c}" in host name')
    return parts
