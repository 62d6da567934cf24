"""Command-line check of a set of environment variables.

Usage:
    envlookup-check --int PORT=8080 --duration TIMEOUT=30s --string HOST=localhost

Every variable is resolved in one pass. Malformed variables are logged
and the command exits with status 1; otherwise the resolved values are
printed as NAME=value lines.
"""
from __future__ import annotations

import argparse
from datetime import datetime
from pathlib import Path
from typing import Any
from urllib.parse import SplitResult

from loguru import logger

from .config.logging import configure_logging
from .registry import EnvRegistry
from .utils.env import load_env_file
from .utils.parsing import parse_duration, parse_int


def _split_spec(spec: str) -> tuple[str, str]:
    name, sep, default = spec.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=DEFAULT, got {spec!r}")
    return name, default


def _log_level(name: str) -> str:
    level = name.upper()
    try:
        logger.level(level)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"unknown log level {name!r}") from e
    return level


class _AppendVariable(argparse.Action):
    """Collect (kind, name, default) triples in command-line order."""

    def __call__(self, parser, namespace, values, option_string=None):
        variables = list(getattr(namespace, self.dest) or [])
        name, default = values
        variables.append((self.const, name, default))
        setattr(namespace, self.dest, variables)


def _register(registry: EnvRegistry, kind: str, name: str, default: str, time_format: str) -> None:
    if kind == "int":
        registry.int(name, parse_int(default))
    elif kind == "duration":
        registry.duration(name, parse_duration(default))
    elif kind == "string":
        registry.string(name, default)
    elif kind == "url":
        registry.url(name, default)
    else:
        registry.time(name, time_format, default)


def _format_value(value: Any) -> str:
    if isinstance(value, SplitResult):
        return value.geturl()
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envlookup-check",
        description="Resolve typed environment variables and report malformed ones.",
    )
    for kind, label in (
        ("int", "integer"),
        ("duration", "duration"),
        ("string", "string"),
        ("url", "URL"),
        ("time", "timestamp"),
    ):
        parser.add_argument(
            f"--{kind}",
            action=_AppendVariable,
            dest="variables",
            const=kind,
            type=_split_spec,
            metavar="NAME=DEFAULT",
            help=f"Register a {label} variable",
        )
    parser.add_argument("--time-format", default="%Y-%m-%dT%H:%M:%S", help="strptime format for --time variables")
    parser.add_argument("--env-file", type=Path, help="Load this .env file before resolving")
    parser.add_argument("--log-level", type=_log_level, default="INFO", help="Minimum log level")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    if args.env_file is not None:
        if not args.env_file.exists():
            parser.error(f"env file not found: {args.env_file}")
        load_env_file(args.env_file)
        logger.debug(f"Loaded {args.env_file}")

    registry = EnvRegistry()
    try:
        for kind, name, default in args.variables or []:
            _register(registry, kind, name, default, args.time_format)
    except ValueError as e:
        parser.error(f"bad default: {e}")

    registry.parse()

    for cell in registry.cells:
        print(f"{cell.name}={_format_value(cell.value)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
