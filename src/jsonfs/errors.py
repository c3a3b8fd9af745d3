"""Exception types raised by jsonfs."""

from __future__ import annotations

from typing import Any, Optional, Sequence


class JsonFsError(Exception):
    """Base class for all jsonfs errors."""


class ParseError(JsonFsError, ValueError):
    """Raised when file content is not well-formed JSON."""

    def __init__(self, reason: str, *, line: Optional[int] = None, column: Optional[int] = None) -> None:
        self.reason = reason
        self.line = line
        self.column = column
        location = f" (line {line}, column {column})" if line is not None else ""
        super().__init__(f"invalid JSON{location}: {reason}")


class ValidationError(JsonFsError, ValueError):
    """Raised when a value does not conform to a store's schema.

    ``errors`` holds the structured error list reported by the validation
    backend, when it provides one.
    """

    def __init__(self, reason: str, errors: Sequence[Any] = ()) -> None:
        self.reason = reason
        self.errors = list(errors)
        super().__init__(reason)
