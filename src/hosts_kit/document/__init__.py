from .document import HostsDocument, parse_document, serialize_document, split_lines

__all__ = [
    "HostsDocument",
    "parse_document",
    "serialize_document",
    "split_lines",
]
