"""Unit tests for diagnostic text formatting."""

from __future__ import annotations

from metabrainz_common.text import format_multiline


def test_single_line_is_wrapped_inline() -> None:
    """A single line is wrapped directly in the prefix and suffix."""
    assert format_multiline("hello") == "<<hello>>"


def test_empty_text_renders_empty_delimiters() -> None:
    """Empty text renders as the bare prefix and suffix."""
    assert format_multiline("") == "<<>>"


def test_trailing_line_breaks_are_discarded() -> None:
    """Trailing CR/LF characters do not produce extra lines."""
    assert format_multiline("hello\r\n\n") == "<<hello>>"


def test_multiple_lines_are_indented() -> None:
    """Each line of multi-line text goes on its own separator-prefixed line."""
    assert format_multiline("one\r\ntwo\nthree") == "<<\n  one\n  two\n  three\n>>"


def test_lone_carriage_returns_split_lines() -> None:
    """Bare CR characters also count as line breaks."""
    assert format_multiline("one\rtwo") == "<<\n  one\n  two\n>>"


def test_custom_delimiters() -> None:
    """Prefix, suffix and separator can be customised."""
    assert format_multiline("a\nb", prefix="[", suffix="]", separator=" | ") == "[ | a | b\n]"
