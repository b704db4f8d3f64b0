"""In-memory model of a parsed config file and its lookup/mutation API.

A ``Document`` is an ordered list of lines, never a mapping: duplicate keys
stay on their own lines so that rendering reproduces the original layout.

* ``get`` returns the value of the *last* occurrence of a key, like the
  game's own loader.
* ``set`` rewrites every occurrence in place, or appends one entry when the
  key is absent.
* Comments and blank lines are invisible to lookups, ``len`` and iteration.

Documents are not thread-safe; share one behind a lock or hand out copies.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from dfconfig import metrics
from dfconfig.errors import InvalidArgumentError
from dfconfig.grammar import Grammar, validate_entry
from dfconfig.lines import Blank, Comment, Entry, Line
from dfconfig.log import get_logger
from dfconfig.parser import parse_lines
from dfconfig.serializer import render_lines
from dfconfig.settings import get_settings

LOGGER = get_logger(__name__)

_LINE_TYPES = (Blank, Comment, Entry)


class KeysView:
    """Keys of every entry in document order, duplicates included.

    Each iteration walks the document afresh, so the view reflects later
    mutations and can be iterated any number of times.
    """

    __slots__ = ("_lines",)

    def __init__(self, lines: list[Line]) -> None:
        self._lines = lines

    def __iter__(self) -> Iterator[str]:
        for line in self._lines:
            if isinstance(line, Entry):
                yield line.key

    def __len__(self) -> int:
        return sum(1 for line in self._lines if isinstance(line, Entry))

    def __contains__(self, key: object) -> bool:
        return any(candidate == key for candidate in self)

    def __repr__(self) -> str:
        return f"KeysView({list(self)!r})"


class EntriesView:
    """``(key, value)`` pairs of every entry in document order."""

    __slots__ = ("_lines",)

    def __init__(self, lines: list[Line]) -> None:
        self._lines = lines

    def __iter__(self) -> Iterator[tuple[str, str]]:
        for line in self._lines:
            if isinstance(line, Entry):
                yield line.key, line.value

    def __len__(self) -> int:
        return sum(1 for line in self._lines if isinstance(line, Entry))

    def __repr__(self) -> str:
        return f"EntriesView({list(self)!r})"


class Document:
    """A config file held as an ordered sequence of lines."""

    def __init__(
        self,
        lines: Iterable[Line] | None = None,
        *,
        grammar: Grammar | str | None = None,
    ) -> None:
        """Create a document, empty unless ``lines`` are given.

        Args:
            lines: Already classified lines (copied, not referenced).
            grammar: Grammar used to validate ``set``; defaults to
                ``Settings.grammar``.

        """
        self._grammar = Grammar(grammar) if grammar is not None else get_settings().grammar
        self._lines: list[Line] = []
        for line in lines or ():
            if not isinstance(line, _LINE_TYPES):
                raise TypeError(f"not a config line: {line!r}")
            self._lines.append(line)

    @classmethod
    def read(cls, text: str, *, grammar: Grammar | str | None = None) -> Document:
        """Parse ``text`` into a document. Unmatched lines become comments."""
        grammar = Grammar(grammar) if grammar is not None else get_settings().grammar
        return cls(parse_lines(text, grammar=grammar), grammar=grammar)

    @property
    def grammar(self) -> Grammar:
        return self._grammar

    @property
    def lines(self) -> tuple[Line, ...]:
        """Snapshot of every line, comments and blanks included."""
        return tuple(self._lines)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the value of the last entry named ``key``, or ``default``."""
        for line in reversed(self._lines):
            if isinstance(line, Entry) and line.key == key:
                return line.value
        return default

    def set(self, key: str, value: str) -> None:
        """Set every entry named ``key`` to ``value``, appending one if none exist.

        Raises:
            InvalidArgumentError: If ``key`` or ``value`` is empty or holds
                characters the document's grammar would not parse back.
                The document is left unchanged.

        """
        try:
            validate_entry(key, value, self._grammar)
        except InvalidArgumentError as exc:
            metrics.observe_set_rejected(field=exc.field)
            LOGGER.warning(
                "document.set_rejected",
                field=exc.field,
                reason=exc.reason,
                grammar=self._grammar.value,
            )
            raise

        updated = 0
        for index, line in enumerate(self._lines):
            if isinstance(line, Entry) and line.key == key:
                self._lines[index] = line.with_value(value)
                updated += 1

        if updated:
            LOGGER.debug("document.entry_updated", key=key, occurrences=updated)
            return

        self._lines.append(Entry(key=key, value=value))
        LOGGER.debug("document.entry_appended", key=key, position=len(self._lines) - 1)

    def remove(self, key: str) -> int:
        """Delete every entry named ``key`` and return how many were removed."""
        kept = [
            line for line in self._lines if not (isinstance(line, Entry) and line.key == key)
        ]
        removed = len(self._lines) - len(kept)
        if removed:
            self._lines[:] = kept
            LOGGER.debug("document.entries_removed", key=key, removed=removed)
        return removed

    def is_empty(self) -> bool:
        return len(self) == 0

    def keys(self) -> KeysView:
        return KeysView(self._lines)

    def entries(self) -> EntriesView:
        return EntriesView(self._lines)

    def to_mapping(self) -> dict[str, str]:
        """Collapse entries into a dict; a repeated key keeps its last value."""
        return dict(self.entries())

    def render(self, newline: str | None = None) -> str:
        """Return the document as text, joined with ``newline`` (CRLF by default)."""
        if newline is None:
            newline = get_settings().line_separator
        return render_lines(self._lines, newline)

    def copy(self) -> Document:
        """Return an independent copy of this document."""
        return Document(self._lines, grammar=self._grammar)

    def __len__(self) -> int:
        return sum(1 for line in self._lines if isinstance(line, Entry))

    def __contains__(self, key: object) -> bool:
        return any(isinstance(line, Entry) and line.key == key for line in self._lines)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._lines == other._lines

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Document(lines={len(self._lines)}, entries={len(self)}, "
            f"grammar={self._grammar.value!r})"
        )
