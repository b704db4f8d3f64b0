"""Round-trip parser and editor for Dwarf Fortress ``init.txt``-style config files.

Usage:
    from dfconfig import Document

    path = "data/init/init.txt"
    with open(path, encoding="utf-8", newline="") as handle:
        doc = Document.read(handle.read())
    doc.get("SOUND")
    doc.set("VOLUME", "128")
    with open(path, "w", encoding="utf-8", newline="") as handle:
        handle.write(doc.render())

Reading and writing config files stays with the caller; the parser and
document only ever see strings.
"""

import logging

from dfconfig.document import Document, EntriesView, KeysView
from dfconfig.errors import DFConfigError, InvalidArgumentError
from dfconfig.grammar import Grammar, classify_line, validate_entry
from dfconfig.lines import Blank, Comment, Entry, Line
from dfconfig.log import configure_logging
from dfconfig.parser import parse_lines, split_lines
from dfconfig.serializer import render_line, render_lines
from dfconfig.settings import Settings, get_settings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Blank",
    "Comment",
    "DFConfigError",
    "Document",
    "EntriesView",
    "Entry",
    "Grammar",
    "InvalidArgumentError",
    "KeysView",
    "Line",
    "Settings",
    "classify_line",
    "configure_logging",
    "get_settings",
    "parse_lines",
    "render_line",
    "render_lines",
    "split_lines",
    "validate_entry",
]
