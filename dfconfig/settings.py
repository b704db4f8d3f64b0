"""Library settings loaded from environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dfconfig.grammar import Grammar

_SEPARATORS = {"crlf": "\r\n", "lf": "\n"}


class Settings(BaseSettings):
    """Environment-driven defaults for documents created without explicit options.

    Only process environment variables are read; no `.env` file is loaded.
    """

    grammar: Grammar = Field(default=Grammar.STRICT, alias="DFCONFIG_GRAMMAR")
    newline: Literal["crlf", "lf"] = Field(default="crlf", alias="DFCONFIG_NEWLINE")
    log_level: str = Field(default="info", alias="DFCONFIG_LOG_LEVEL")
    metrics_enabled: bool = Field(default=True, alias="DFCONFIG_METRICS_ENABLED")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def line_separator(self) -> str:
        return _SEPARATORS[self.newline]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached Settings instance."""
    return Settings()
