"""Line classification for ``[KEY:VALUE]`` config files.

Two grammars are supported:

* ``strict`` (default) only accepts word characters in keys and word
  characters or colons in values. Near-miss lines such as
  ``[FONT:curses_640x300.png]`` are kept as comments, which is always
  safe for round-tripping.
* ``permissive`` accepts anything except ``:`` and ``]`` in keys and
  anything except ``]`` in values.

Values are captured up to the closing bracket, so ``[A:B:C]`` has key
``A`` and value ``B:C``. Lines starting with whitespace never match.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

from dfconfig.errors import InvalidArgumentError
from dfconfig.lines import Blank, Comment, Entry, Line


class Grammar(str, Enum):
    """Which character classes an entry line may use."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class _Patterns:
    entry: re.Pattern[str]
    key: re.Pattern[str]
    value: re.Pattern[str]


_STRICT_KEY = r"\w+"
_STRICT_VALUE = r"[\w:]+"
_PERMISSIVE_KEY = r"[^:\]\r\n]+"
_PERMISSIVE_VALUE = r"[^\]\r\n]+"

# Unicode White_Space; str.isspace() also counts \x1c-\x1f, which must stay content.
_WHITESPACE = (
    " \t\n\v\f\r\x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)

# Compiled once at import; read-only afterwards.
_PATTERNS: dict[Grammar, _Patterns] = {
    Grammar.STRICT: _Patterns(
        entry=re.compile(rf"\[({_STRICT_KEY}):({_STRICT_VALUE})\]"),
        key=re.compile(_STRICT_KEY),
        value=re.compile(_STRICT_VALUE),
    ),
    Grammar.PERMISSIVE: _Patterns(
        entry=re.compile(rf"\[({_PERMISSIVE_KEY}):({_PERMISSIVE_VALUE})\]"),
        key=re.compile(_PERMISSIVE_KEY),
        value=re.compile(_PERMISSIVE_VALUE),
    ),
}


def classify_line(raw: str, grammar: Grammar = Grammar.STRICT) -> Line:
    """Classify a single physical line (terminator already removed).

    Trailing whitespace is ignored for matching only; a comment keeps the
    original text untouched.
    """

    trimmed = raw.rstrip(_WHITESPACE)
    if not trimmed:
        return Blank()

    match = _PATTERNS[Grammar(grammar)].entry.fullmatch(trimmed)
    if match is None:
        return Comment(raw)
    return Entry(key=match.group(1), value=match.group(2))


def _check(field: str, argument: Any, pattern: re.Pattern[str]) -> None:
    if not isinstance(argument, str):
        raise InvalidArgumentError(field, argument, f"expected str, got {type(argument).__name__}")
    if not argument:
        raise InvalidArgumentError(field, argument, "must not be empty")
    if pattern.fullmatch(argument) is None:
        raise InvalidArgumentError(field, argument, "contains characters not allowed in an entry")


def validate_entry(key: Any, value: Any, grammar: Grammar = Grammar.STRICT) -> None:
    """Raise ``InvalidArgumentError`` unless ``[key:value]`` would parse back as-is."""

    patterns = _PATTERNS[Grammar(grammar)]
    _check("key", key, patterns.key)
    _check("value", value, patterns.value)
