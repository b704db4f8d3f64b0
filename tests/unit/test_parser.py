"""Tests for splitting and classifying config text."""

from __future__ import annotations

import pytest
from dfconfig.grammar import Grammar
from dfconfig.lines import Blank, Comment, Entry
from dfconfig.parser import parse_lines, split_lines


class TestSplitLines:
    """Tests for physical line splitting."""

    def test_empty_text_has_no_lines(self) -> None:
        """Empty input should produce no lines at all."""
        assert split_lines("") == []

    def test_crlf_terminators_are_removed(self) -> None:
        """CRLF terminators should not end up in line text."""
        assert split_lines("a\r\nb\r\nc") == ["a", "b", "c"]

    def test_bare_lf_is_accepted(self) -> None:
        """A bare LF should also end a line."""
        assert split_lines("a\nb\r\nc") == ["a", "b", "c"]

    def test_trailing_terminator_yields_final_empty_line(self) -> None:
        """A trailing terminator should leave an empty final line."""
        assert split_lines("a\r\n") == ["a", ""]

    def test_only_one_carriage_return_is_dropped(self) -> None:
        """Only the CR directly before LF belongs to the terminator."""
        assert split_lines("a\r\r\nb") == ["a\r", "b"]

    def test_unterminated_carriage_return_is_kept(self) -> None:
        """A CR without a following LF is line content."""
        assert split_lines("a\r") == ["a\r"]

    def test_non_string_rejected(self) -> None:
        """Bytes should be rejected rather than decoded."""
        with pytest.raises(TypeError):
            split_lines(b"[A:B]")  # type: ignore[arg-type]


class TestParseLines:
    """Tests for line classification over whole documents."""

    def test_mixed_document(self) -> None:
        """Entries, comments and blanks should keep their order."""
        text = "[A:B]\r\nfoo bar\r\n\r\n[C:D]"
        assert parse_lines(text) == [
            Entry(key="A", value="B"),
            Comment("foo bar"),
            Blank(),
            Entry(key="C", value="D"),
        ]

    def test_any_input_is_accepted(self) -> None:
        """Malformed input should degrade to comments, never fail."""
        text = "]]][[[:::\r\n\x00\x01\r\n[\r\n:\r\n]"
        lines = parse_lines(text)
        assert len(lines) == 5
        assert all(isinstance(line, (Comment, Blank)) for line in lines)

    def test_grammar_changes_classification(self) -> None:
        """The permissive grammar should accept punctuation in values."""
        text = "[FONT:curses_640x300.png]"
        assert parse_lines(text) == [Comment(text)]
        assert parse_lines(text, grammar=Grammar.PERMISSIVE) == [
            Entry(key="FONT", value="curses_640x300.png")
        ]

    def test_comment_keeps_trailing_whitespace(self) -> None:
        """Comment text should keep trailing whitespace."""
        assert parse_lines("note  \r\n[A:B]") == [Comment("note  "), Entry(key="A", value="B")]
