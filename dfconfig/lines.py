"""Line variants that make up a parsed config document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Blank:
    """An empty or whitespace-only line."""

    kind = "blank"


@dataclass(frozen=True, slots=True)
class Comment:
    """Any line that is not an entry, kept exactly as read."""

    text: str

    kind = "comment"


@dataclass(frozen=True, slots=True)
class Entry:
    """A ``[KEY:VALUE]`` line."""

    key: str
    value: str

    kind = "entry"

    def with_value(self, value: str) -> Entry:
        return Entry(key=self.key, value=value)


Line = Union[Blank, Comment, Entry]
