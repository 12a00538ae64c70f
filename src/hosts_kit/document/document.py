# src/hosts_kit/document/document.py

import logging
from collections.abc import Iterable, Iterator
from time import monotonic

from hosts_kit.config import DEFAULT_FORMAT, FormatConfig
from hosts_kit.errors import ParseError
from hosts_kit.lines.models import LINE_TYPES, HostLine, Line
from hosts_kit.lines.parser import parse_line
from hosts_kit.lines.renderer import render_line
from hosts_kit.observability import names
from hosts_kit.observability.base import MetricsHook, NoOpMetricsHook

logger = logging.getLogger(__name__)


def _check_line(line: object) -> Line:
    if not isinstance(line, LINE_TYPES):
        raise TypeError(f"Expected a line record, got {type(line).__name__}")
    return line


class HostsDocument:
    """Ordered line records of one hosts file.

    Order equals input line order. The records are only reachable as a
    read-only tuple; edits go through the helpers below, which only ever
    store valid line records.
    """

    def __init__(self, lines: Iterable[Line] = ()) -> None:
        self._lines: list[Line] = [_check_line(line) for line in lines]

    @property
    def lines(self) -> tuple[Line, ...]:
        return tuple(self._lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HostsDocument):
            return NotImplemented
        return self._lines == other._lines

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"HostsDocument(lines={self._lines!r})"

    @classmethod
    def from_string(
        cls,
        text: str,
        *,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "HostsDocument":
        return parse_document(text, metrics_hook=metrics_hook)

    parse = from_string

    def serialize(self, *, config: FormatConfig = DEFAULT_FORMAT) -> str:
        return serialize_document(self, config=config)

    def __str__(self) -> str:
        return self.serialize()

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)

    # --- editing ---

    def append(self, line: Line) -> None:
        self._lines.append(_check_line(line))

    def insert(self, index: int, line: Line) -> None:
        self._lines.insert(index, _check_line(line))

    def extend(self, lines: Iterable[Line]) -> None:
        self._lines.extend(_check_line(line) for line in lines)

    def remove_hostname(self, hostname: str) -> int:
        """
        Drop ``hostname`` from every host line listing it.

        Host lines left without hostnames are removed from the document.
        Returns the number of host lines changed or removed.
        """
        kept: list[Line] = []
        touched = 0
        for line in self._lines:
            if isinstance(line, HostLine) and hostname in line.hostnames:
                touched += 1
                remaining = tuple(h for h in line.hostnames if h != hostname)
                if not remaining:
                    logger.debug("Removing host line for %s", line.address)
                    continue
                line = HostLine(
                    address=line.address, hostnames=remaining, comment=line.comment
                )
            kept.append(line)
        self._lines = kept
        return touched

    # --- lookup ---

    def host_lines(self) -> list[HostLine]:
        return [line for line in self.lines if isinstance(line, HostLine)]

    def find(self, hostname: str) -> list[HostLine]:
        return [line for line in self.host_lines() if hostname in line.hostnames]

    def addresses_for(self, hostname: str) -> list[str]:
        return [line.address for line in self.find(hostname)]


def split_lines(text: str) -> list[str]:
    """
    Split on ``\\n``. A final newline does not produce a trailing empty line,
    and ``""`` has no lines. A ``\\r`` before the newline is left in place;
    line trimming removes it.
    """
    if not text:
        return []
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return parts


def parse_document(
    text: str,
    *,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> HostsDocument:
    """
    Parse a whole hosts file.

    Every line is parsed on its own. The first failing line aborts the parse:
    its ParseError is re-raised with the 1-based line number attached, and no
    partial document is returned.
    """
    start = monotonic()
    lines: list[Line] = []

    for line_number, raw in enumerate(split_lines(text), start=1):
        try:
            lines.append(parse_line(raw))
        except ParseError as exc:
            metrics_hook.increment(
                names.DOCUMENT_PARSE_ERRORS_TOTAL,
                labels={"error": type(exc).__name__},
            )
            logger.error("Failed to parse hosts file at line %d: %r", line_number, raw)
            raise exc.at_line(line_number) from exc

    document = HostsDocument(lines=lines)

    elapsed_ms = 1000 * (monotonic() - start)
    metrics_hook.record_latency(names.DOCUMENT_PARSE_DURATION, elapsed_ms)
    metrics_hook.increment(names.DOCUMENT_LINES_PARSED, len(lines))
    metrics_hook.record_gauge(names.DOCUMENT_HOST_LINES, len(document.host_lines()))
    logger.debug("Parsed hosts file: %d lines", len(lines))
    return document


def serialize_document(
    document: HostsDocument,
    *,
    config: FormatConfig = DEFAULT_FORMAT,
) -> str:
    """Render every line, join with ``config.newline`` and end with one newline."""
    rendered = [render_line(line, config=config) for line in document.lines]
    return config.newline.join(rendered) + config.newline
