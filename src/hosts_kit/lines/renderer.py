# src/hosts_kit/lines/renderer.py

from hosts_kit.config import DEFAULT_FORMAT, FormatConfig

from .models import CommentLine, EmptyLine, HostLine, Line


def render_line(line: Line, *, config: FormatConfig = DEFAULT_FORMAT) -> str:
    """Render a record as one line of text, without a line ending."""
    if isinstance(line, EmptyLine):
        return ""

    if isinstance(line, CommentLine):
        return line.text

    if isinstance(line, HostLine):
        parts = [line.address, *line.hostnames]
        if line.comment is not None:
            parts.append(line.comment)
        return config.separator.join(parts)

    raise TypeError(f"Not a line record: {type(line).__name__}")
