from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from dfconfig import Document, Grammar
from dfconfig.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults() -> None:
    settings = Settings()
    assert settings.grammar is Grammar.STRICT
    assert settings.newline == "crlf"
    assert settings.line_separator == "\r\n"
    assert settings.metrics_enabled is True


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DFCONFIG_GRAMMAR", "permissive")
    monkeypatch.setenv("DFCONFIG_NEWLINE", "lf")
    settings = Settings()
    assert settings.grammar is Grammar.PERMISSIVE
    assert settings.line_separator == "\n"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_documents_follow_configured_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DFCONFIG_GRAMMAR", "permissive")
    monkeypatch.setenv("DFCONFIG_NEWLINE", "lf")
    doc = Document.read("[FONT:a.png]\r\nfoo")
    assert doc.grammar is Grammar.PERMISSIVE
    assert doc.get("FONT") == "a.png"
    assert doc.render() == "[FONT:a.png]\nfoo"


def test_explicit_grammar_beats_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DFCONFIG_GRAMMAR", "permissive")
    doc = Document.read("[FONT:a.png]", grammar=Grammar.STRICT)
    assert doc.get("FONT") is None


def test_dotenv_file_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / ".env").write_text(
        "DFCONFIG_GRAMMAR=permissive\nDFCONFIG_NEWLINE=lf\nDFCONFIG_METRICS_ENABLED=maybe\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)
    text = "[FONT:a.png]\r\n[A:B]"
    doc = Document.read(text)
    assert doc.grammar is Grammar.STRICT
    assert doc.get("FONT") is None
    assert doc.render() == text
