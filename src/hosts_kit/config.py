# src/hosts_kit/config.py

from dataclasses import dataclass
from typing import Literal

Separator = Literal[" ", "\t"]
Newline = Literal["\n", "\r\n"]


@dataclass(frozen=True)
class FormatConfig:
    """Output layout for rendered lines and serialized documents.

    Immutable. Explicit. No magic defaults from environment.
    The defaults produce the canonical form: single-space separated tokens,
    ``\\n`` line endings.
    """

    separator: Separator = " "
    newline: Newline = "\n"

    def __post_init__(self) -> None:
        if self.separator not in (" ", "\t"):
            raise ValueError(f"Unsupported separator: {self.separator!r}")
        if self.newline not in ("\n", "\r\n"):
            raise ValueError(f"Unsupported newline: {self.newline!r}")


DEFAULT_FORMAT = FormatConfig()
