"""Tests for the string parsers."""
from datetime import datetime, timedelta

import pytest

from envlookup.utils.parsing import parse_duration, parse_int, parse_time, parse_url


@pytest.mark.parametrize("raw, expected", [("9090", 9090), ("-12", -12), ("+7", 7), ("007", 7)])
def test_parse_int_accepts_signed_decimal(raw, expected):
    assert parse_int(raw) == expected


@pytest.mark.parametrize("raw", ["abc", " 5", "5 ", "1_000", "0x10", "1.5", "+", ""])
def test_parse_int_rejects_everything_else(raw):
    with pytest.raises(ValueError, match="invalid syntax"):
        parse_int(raw)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("250ms", timedelta(milliseconds=250)),
        ("5s", timedelta(seconds=5)),
        ("1h30m", timedelta(hours=1, minutes=30)),
        ("2h45m10.5s", timedelta(hours=2, minutes=45, seconds=10.5)),
        ("-1.5h", timedelta(minutes=-90)),
        ("+3m", timedelta(minutes=3)),
        ("1500us", timedelta(milliseconds=1.5)),
        ("7µs", timedelta(microseconds=7)),
        ("7μs", timedelta(microseconds=7)),
        ("2000ns", timedelta(microseconds=2)),
        (".5s", timedelta(milliseconds=500)),
        ("0", timedelta(0)),
    ],
)
def test_parse_duration(raw, expected):
    assert parse_duration(raw) == expected


def test_parse_duration_truncates_below_microsecond():
    assert parse_duration("1500ns") == timedelta(microseconds=1)


@pytest.mark.parametrize(
    "raw, message",
    [
        ("", "invalid duration"),
        ("-", "invalid duration"),
        ("abc", "invalid duration"),
        (".s", "invalid duration"),
        ("5", "missing unit"),
        ("1h5", "missing unit"),
        ("5x", 'unknown unit "x"'),
        ("5 s", 'unknown unit " s"'),
    ],
)
def test_parse_duration_errors(raw, message):
    with pytest.raises(ValueError, match=message):
        parse_duration(raw)


def test_parse_time_uses_strptime_format():
    assert parse_time("%Y-%m-%d %H:%M", "2024-03-01 12:30") == datetime(2024, 3, 1, 12, 30)


def test_parse_time_rejects_mismatch():
    with pytest.raises(ValueError):
        parse_time("%Y-%m-%d", "01/03/2024")


def test_parse_url_absolute():
    url = parse_url("https://user@example.com:8443/api/v1?q=1#top")
    assert url.scheme == "https"
    assert url.hostname == "example.com"
    assert url.port == 8443
    assert url.path == "/api/v1"
    assert url.query == "q=1"
    assert url.fragment == "top"


def test_parse_url_relative():
    url = parse_url("../static/app.js")
    assert url.scheme == ""
    assert url.path == "../static/app.js"


@pytest.mark.parametrize(
    "raw, message",
    [
        ("http://exa\nmple.com", "invalid control character"),
        ("http://example.com/%zz", 'invalid URL escape "%zz"'),
        ("http://example.com/100%", 'invalid URL escape "%"'),
        (":foo", "missing protocol scheme"),
        ("http://[::1", "Invalid IPv6 URL"),
        ("http://example.com:port/", "Port could not be cast"),
    ],
)
def test_parse_url_errors(raw, message):
    with pytest.raises(ValueError, match=message):
        parse_url(raw)


@pytest.mark.parametrize(
    "raw, message",
    [
        ("http://exa mple.com/", 'invalid character " " in host name'),
        ("http://exa<mple.com/", 'invalid character "<" in host name'),
        ("1a:b", "first path segment in URL cannot contain colon"),
        ("a/b:c", None),
        ("localhost:8080", None),
    ],
)
def test_parse_url_host_and_first_segment(raw, message):
    if message is None:
        parse_url(raw)
        return
    with pytest.raises(ValueError, match=message):
        parse_url(raw)
