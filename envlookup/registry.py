"""Deferred registration of typed environment variables.

Register every variable on an EnvRegistry first, keep the returned cells,
then call ``parse()`` once all registrations are done::

    registry = EnvRegistry()
    port = registry.int("PORT", 8080)
    host = registry.string("HOST", "localhost")
    registry.parse()
    serve(host.value, port.value)

``parse()`` runs every resolver, logs one line per malformed variable and
exits with status 1 if any failed, so all configuration mistakes are
reported in a single run.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, Generic, Mapping, TypeVar
from urllib.parse import SplitResult

from .schemas.errors import EnvError, ErrorKind, MalformedDefaultError
from .utils.diagnostics import fail, report
from .utils.env import get_env_var
from .utils.parsing import parse_duration, parse_int, parse_time, parse_url

T = TypeVar("T")

Resolver = Callable[[], "EnvError | None"]


@dataclass
class Cell(Generic[T]):
    """Destination for one registered variable.

    Holds ``default`` until the owning registry is parsed.
    """
    name: str
    default: T
    value: T


class EnvRegistry:
    """Ordered collection of pending variable resolvers."""

    def __init__(self, environ: Mapping[str, str] | None = None):
        """Initialize an empty registry.

        Args:
            environ: Mapping to read from instead of os.environ
        """
        self.environ = environ
        self._resolvers: list[Resolver] = []
        self._cells: list[Cell[Any]] = []

    def __len__(self) -> int:
        return len(self._resolvers)

    @property
    def cells(self) -> list[Cell[Any]]:
        return list(self._cells)

    def _register(self, name: str, default: T, parse: Callable[[str], T] | None) -> Cell[T]:
        cell: Cell[T] = Cell(name=name, default=default, value=default)

        def resolve() -> EnvError | None:
            cell.value = cell.default
            raw = get_env_var(name, environ=self.environ)
            if raw is None:
                return None
            if parse is None:
                cell.value = raw
                return None
            try:
                cell.value = parse(raw)
            except ValueError as e:
                return EnvError(kind=ErrorKind.MALFORMED_VALUE, name=name, value=raw, cause=str(e))
            return None

        self._resolvers.append(resolve)
        self._cells.append(cell)
        return cell

    def int(self, name: str, default: int) -> Cell[int]:
        """Register a base-10 integer variable."""
        return self._register(name, default, parse_int)

    def string(self, name: str, default: str) -> Cell[str]:
        """Register a string variable. Any non-empty value is taken verbatim."""
        return self._register(name, default, None)

    def duration(self, name: str, default: timedelta) -> Cell[timedelta]:
        return self._register(name, default, parse_duration)

    def time(self, name: str, fmt: str, value: str) -> Cell[datetime]:
        """Register a timestamp variable parsed with a strptime format.

        Raises:
            MalformedDefaultError: If ``value`` does not match ``fmt``
        """
        def parse(s: str) -> datetime:
            return parse_time(fmt, s)

        return self._register(name, _parse_default(name, value, parse), parse)

    def url(self, name: str, value: str) -> Cell[SplitResult]:
        """Register a URL variable with ``value`` as the default URL string.

        Raises:
            MalformedDefaultError: If ``value`` is not a valid URL
        """
        return self._register(name, _parse_default(name, value, parse_url), parse_url)

    def resolve(self) -> list[EnvError]:
        """Run every resolver in registration order.

        Failures do not stop later resolvers. Each failure is logged.

        Returns:
            The errors of the resolvers that failed, in registration order
        """
        errors = []
        for resolver in self._resolvers:
            error = resolver()
            if error is not None:
                report(error)
                errors.append(error)
        return errors

    def parse(self) -> None:
        """Resolve all registered variables, exiting with status 1 on any failure.

        May be called again; each run starts every cell from its default.
        """
        if self.resolve():
            fail()


def _parse_default(name: str, value: str, parse: Callable[[str], T]) -> T:
    try:
        return parse(value)
    except ValueError as e:
        raise MalformedDefaultError(
            EnvError(kind=ErrorKind.MALFORMED_DEFAULT, name=name, value=value, cause=str(e))
        ) from e
