# src/hosts_kit/lines/models.py

from dataclasses import dataclass
from typing import TypeAlias

from .tokens import check_comment, check_token


@dataclass(frozen=True)
class EmptyLine:
    """A blank line."""

    @property
    def address(self) -> str | None:
        return None

    @property
    def hostnames(self) -> tuple[str, ...]:
        return ()

    @property
    def comment(self) -> str | None:
        return None

    @property
    def is_empty(self) -> bool:
        return True

    @property
    def is_host(self) -> bool:
        return False

    @property
    def has_comment(self) -> bool:
        return False

    def __str__(self) -> str:
        from .renderer import render_line

        return render_line(self)


@dataclass(frozen=True)
class CommentLine:
    """A whole-line comment, stored verbatim including the leading ``#``."""

    text: str

    @property
    def address(self) -> str | None:
        return None

    @property
    def hostnames(self) -> tuple[str, ...]:
        return ()

    @property
    def comment(self) -> str | None:
        return self.text

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def is_host(self) -> bool:
        return False

    @property
    def has_comment(self) -> bool:
        return True

    def __str__(self) -> str:
        from .renderer import render_line

        return render_line(self)


@dataclass(frozen=True)
class HostLine:
    """An address mapped to one or more hostnames.

    ``address`` is opaque: no IP syntax check is made. ``comment`` holds the
    trailing inline comment (``#`` included) when the line had one.

    Construction only accepts values that render to a line parsing back to
    an equal record: address and hostnames are single non-comment tokens,
    the comment starts with ``#`` and is single-space separated.
    """

    address: str
    hostnames: tuple[str, ...]
    comment: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.hostnames, str):
            raise TypeError("hostnames must be a sequence of str, not a str")
        # lists are accepted for convenience but stored as a tuple
        object.__setattr__(self, "hostnames", tuple(self.hostnames))
        if not self.hostnames:
            raise ValueError("HostLine requires at least one hostname")
        check_token(self.address, "address")
        for hostname in self.hostnames:
            check_token(hostname, "hostname")
        if self.comment is not None:
            check_comment(self.comment)

    @property
    def is_empty(self) -> bool:
        return False

    @property
    def is_host(self) -> bool:
        return True

    @property
    def has_comment(self) -> bool:
        return self.comment is not None

    def __str__(self) -> str:
        from .renderer import render_line

        return render_line(self)


Line: TypeAlias = EmptyLine | CommentLine | HostLine

LINE_TYPES = (EmptyLine, CommentLine, HostLine)


def from_empty() -> EmptyLine:
    return EmptyLine()


def from_comment(text: str) -> CommentLine:
    """Build a comment line without parsing. ``text`` is kept as given."""
    return CommentLine(text=text)
