"""Reader stage: turn raw config text into classified lines."""

from __future__ import annotations

from time import perf_counter

from dfconfig import metrics
from dfconfig.grammar import Grammar, classify_line
from dfconfig.lines import Line
from dfconfig.log import get_logger

LOGGER = get_logger(__name__)


def split_lines(text: str) -> list[str]:
    """Split ``text`` on ``\\n``, dropping one ``\\r`` before each terminator.

    A trailing terminator produces a final empty line so that joining the
    result with the same separator gives back the input. Empty text has no
    lines at all.
    """

    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    if not text:
        return []

    physical = text.split("\n")
    # The last piece has no terminator after it, so a trailing \r is content.
    return [line[:-1] if line.endswith("\r") else line for line in physical[:-1]] + [
        physical[-1]
    ]


def parse_lines(text: str, *, grammar: Grammar = Grammar.STRICT) -> list[Line]:
    """Classify every line of ``text``. Never fails for string input."""

    start = perf_counter()
    lines = [classify_line(raw, grammar) for raw in split_lines(text)]
    latency_ms = (perf_counter() - start) * 1000

    metrics.observe_parse(latency_ms=latency_ms, lines=lines)
    LOGGER.debug(
        "document.parsed",
        grammar=Grammar(grammar).value,
        lines=len(lines),
        entries=sum(1 for line in lines if line.kind == "entry"),
        latency_ms=latency_ms,
    )
    return lines
