"""Tests for paragraph-aware word wrapping."""

from __future__ import annotations

from io import StringIO

from shellui.ui.streams import PlainStream
from shellui.ui.wrap import print_wrapped, wrap, wrap_lines


def test_words_pack_greedily() -> None:
    assert wrap_lines("a b c d e", 6, 0) == ["a b c", "d e", ""]


def test_indent_counts_against_width() -> None:
    lines = wrap_lines("alpha beta gamma delta", 14, 2)

    assert lines == ["  alpha beta", "  gamma delta", ""]
    assert all(len(line) <= 14 for line in lines)


def test_paragraphs_are_separated_by_blank_lines() -> None:
    assert wrap("one two\n\nthree", 20, 0) == "one two\n\nthree\n\n"


def test_single_newlines_are_whitespace() -> None:
    assert wrap_lines("one\ntwo   three", 40, 1) == [" one two three", ""]


def test_overlong_word_sits_alone() -> None:
    assert wrap_lines("a supercalifragilistic b", 8, 0) == ["a", "supercalifragilistic", "b", ""]


def test_width_counts_characters_not_bytes() -> None:
    lines = wrap_lines("ääää ööö üü", 9, 0)

    assert lines == ["ääää ööö", "üü", ""]


def test_empty_text_yields_single_blank_line() -> None:
    assert wrap_lines("", 10, 2) == [""]


def test_print_wrapped_writes_and_flushes() -> None:
    buffer = StringIO()

    print_wrapped(PlainStream(buffer), "hello world", 8, 2)

    assert buffer.getvalue() == "  hello\n  world\n\n"
