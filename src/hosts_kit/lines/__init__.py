from .models import (
    LINE_TYPES,
    CommentLine,
    EmptyLine,
    HostLine,
    Line,
    from_comment,
    from_empty,
)
from .parser import parse_line
from .renderer import render_line

__all__ = [
    # Records
    "CommentLine",
    "EmptyLine",
    "HostLine",
    "Line",
    "LINE_TYPES",
    # Constructors
    "from_comment",
    "from_empty",
    # Parse / render
    "parse_line",
    "render_line",
]
