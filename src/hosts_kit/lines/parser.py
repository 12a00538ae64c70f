# src/hosts_kit/lines/parser.py

import logging
from itertools import takewhile

from hosts_kit.errors import MissingAddressError, NoHostnamesError

from .models import CommentLine, EmptyLine, HostLine, Line
from .tokens import is_comment, split_tokens, trim

logger = logging.getLogger(__name__)


def parse_line(text: str) -> Line:
    """
    Classify one physical line.

    - Blank (after trimming) -> EmptyLine
    - Starts with '#'        -> CommentLine holding the trimmed text
    - Otherwise              -> HostLine: address, hostnames, optional comment

    A comment inside a host line only starts at a token boundary, so
    ``host#x`` is a hostname.

    Raises:
        MissingAddressError: no tokens on a non-empty, non-comment line.
        NoHostnamesError: the address is not followed by a hostname.
    """
    line = trim(text)
    if not line:
        return EmptyLine()

    if is_comment(line):
        return CommentLine(text=line)

    tokens = split_tokens(line)
    if not tokens:
        logger.debug("Line has no address token: %r", text)
        raise MissingAddressError(text)

    address, rest = tokens[0], tokens[1:]
    hostnames = list(takewhile(lambda t: not is_comment(t), rest))
    if not hostnames:
        logger.debug("Address %s has no hostnames: %r", address, text)
        raise NoHostnamesError(text)

    comment = " ".join(rest[len(hostnames) :]) or None

    return HostLine(address=address, hostnames=tuple(hostnames), comment=comment)
