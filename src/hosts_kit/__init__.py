# Config
from .config import FormatConfig

# Document
from .document import HostsDocument, parse_document, serialize_document

# Entries
from .entries import HostSpec

# Errors
from .errors import MissingAddressError, NoHostnamesError, ParseError

# Lines
from .lines import (
    CommentLine,
    EmptyLine,
    HostLine,
    Line,
    from_comment,
    from_empty,
    parse_line,
    render_line,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

__all__ = [
    # Config
    "FormatConfig",
    # Document
    "HostsDocument",
    "parse_document",
    "serialize_document",
    # Entries
    "HostSpec",
    # Errors
    "MissingAddressError",
    "NoHostnamesError",
    "ParseError",
    # Lines
    "CommentLine",
    "EmptyLine",
    "HostLine",
    "Line",
    "from_comment",
    "from_empty",
    "parse_line",
    "render_line",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
]
