"""Error types raised by the config engine."""

from __future__ import annotations

from typing import Any


class DFConfigError(Exception):
    """Base class for errors raised by dfconfig."""


class InvalidArgumentError(DFConfigError, ValueError):
    """A key or value cannot be written without breaking the line grammar."""

    def __init__(self, field: str, argument: Any, reason: str) -> None:
        self.field = field
        self.argument = argument
        self.reason = reason
        super().__init__(f"invalid {field} {argument!r}: {reason}")
