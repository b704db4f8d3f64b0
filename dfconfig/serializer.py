"""Render classified lines back to text."""

from __future__ import annotations

from collections.abc import Iterable

from dfconfig.lines import Blank, Comment, Entry, Line

CRLF = "\r\n"


def render_line(line: Line) -> str:
    if isinstance(line, Entry):
        return f"[{line.key}:{line.value}]"
    if isinstance(line, Comment):
        return line.text
    if isinstance(line, Blank):
        return ""
    raise TypeError(f"not a config line: {line!r}")


def render_lines(lines: Iterable[Line], newline: str = CRLF) -> str:
    """Join rendered lines with ``newline``; no trailing separator is added."""
    return newline.join(render_line(line) for line in lines)
