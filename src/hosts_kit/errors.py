# src/hosts_kit/errors.py

"""Errors raised while parsing hosts-file text.

Every parse failure derives from ``ParseError`` so callers can catch a single
type. Rendering and serialization never raise.
"""

from typing import TypeVar

_E = TypeVar("_E", bound="ParseError")


class ParseError(ValueError):
    """A line could not be classified as empty, comment, or host entry."""

    reason = "invalid line"

    def __init__(
        self,
        line: str | None = None,
        *,
        line_number: int | None = None,
    ) -> None:
        self.line = line
        self.line_number = line_number
        super().__init__(self._format())

    def _format(self) -> str:
        message = "Error parsing hosts file"
        if self.line_number is not None:
            message += f" at line {self.line_number}"
        message += f": {self.reason}"
        if self.line is not None:
            message += f" ({self.line!r})"
        return message

    def at_line(self: _E, line_number: int) -> _E:
        """Return a copy of this error carrying the 1-based line number."""
        return type(self)(self.line, line_number=line_number)


class MissingAddressError(ParseError):
    reason = "missing address"


class NoHostnamesError(ParseError):
    reason = "address has no hostnames"
