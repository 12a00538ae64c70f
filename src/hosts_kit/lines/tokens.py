# src/hosts_kit/lines/tokens.py

"""Token rules shared by the line parser and the line records.

Whitespace is the Unicode White_Space set. ``str.isspace`` is not used: it
also matches the information separators U+001C..U+001F, which belong inside
a token.
"""

import re

COMMENT_PREFIX = "#"

WHITESPACE = (
    "\t\n\x0b\x0c\r\x20"
    "\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

_WHITESPACE_RUN = re.compile(f"[{re.escape(WHITESPACE)}]+")


def is_comment(token: str) -> bool:
    return token.startswith(COMMENT_PREFIX)


def has_whitespace(value: str) -> bool:
    return _WHITESPACE_RUN.search(value) is not None


def trim(text: str) -> str:
    return text.strip(WHITESPACE)


def split_tokens(text: str) -> list[str]:
    """Split on whitespace runs, dropping empty edges."""
    return [token for token in _WHITESPACE_RUN.split(text) if token]


def check_token(value: str, what: str) -> str:
    """
    Raise ValueError unless ``value`` survives a render/parse cycle as one
    non-comment token.
    """
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a str, got {type(value).__name__}")
    if not value:
        raise ValueError(f"{what} must not be empty")
    if has_whitespace(value):
        raise ValueError(f"{what} must not contain whitespace: {value!r}")
    if is_comment(value):
        raise ValueError(f"{what} must not start with '#': {value!r}")
    return value


def normalize_comment(value: str) -> str:
    """Collapse whitespace runs to single spaces, as parsing does."""
    return " ".join(split_tokens(value))


def check_comment(value: str) -> str:
    """Raise ValueError unless ``value`` is an inline comment in parsed form."""
    if not isinstance(value, str):
        raise TypeError(f"comment must be a str, got {type(value).__name__}")
    if not is_comment(value):
        raise ValueError(f"comment must start with '#': {value!r}")
    if value != normalize_comment(value):
        raise ValueError(f"comment must be single-space separated: {value!r}")
    return value
