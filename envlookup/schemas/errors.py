"""Structured errors and lookup results."""
from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Why a variable could not be resolved."""
    MALFORMED_DEFAULT = "malformed_default"
    MALFORMED_VALUE = "malformed_value"


class EnvError(BaseModel):
    """A failure to parse one environment variable or its default."""
    kind: ErrorKind = Field(description="Programmer error or operational error")
    name: str = Field(description="Environment variable name")
    value: str = Field(description="The string that failed to parse")
    cause: str = Field(description="Human-readable parse error")

    def __str__(self) -> str:
        return f"{self.name} {self.cause}"


class EnvParseError(ValueError):
    """Raised when a lookup result carrying an error is unwrapped."""

    def __init__(self, error: EnvError):
        super().__init__(str(error))
        self.error = error


class MalformedDefaultError(EnvParseError):
    """The default passed by the caller does not parse."""


class MalformedValueError(EnvParseError):
    """The value found in the environment does not parse."""


_EXCEPTIONS = {
    ErrorKind.MALFORMED_DEFAULT: MalformedDefaultError,
    ErrorKind.MALFORMED_VALUE: MalformedValueError,
}


def error_for(error: EnvError) -> EnvParseError:
    """Build the exception matching an error's kind."""
    return _EXCEPTIONS[error.kind](error)


class LookupResult(BaseModel):
    """Either a resolved value or the error that prevented it."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str = Field(description="Environment variable name")
    value: Any = Field(default=None, description="Resolved value, None on error")
    error: EnvError | None = Field(default=None, description="Set when resolution failed")

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Any:
        """Return the value or raise the exception for the error kind."""
        if self.error is not None:
            raise error_for(self.error)
        return self.value
