"""Tests for text utility functions."""

from __future__ import annotations

import pytest

from blogpipe.utils.text import (
    collapse_whitespace,
    count_words,
    round_half_up,
    single_line,
    truncate,
)


class TestTruncate:
    """Test truncate function."""

    def test_short_text_unchanged(self) -> None:
        """Should return text within the limit untouched."""
        assert truncate("hello", 300) == "hello"

    def test_exact_limit_unchanged(self) -> None:
        """Should not add an ellipsis at exactly max_chars."""
        text = "x" * 300

        assert truncate(text, 300) == text

    def test_long_text_gets_ellipsis(self) -> None:
        """Should keep 297 characters and append an ellipsis."""
        text = "".join(str(i % 10) for i in range(301))

        result = truncate(text, 300)

        assert len(result) == 300
        assert result == text[:297] + "..."


class TestWhitespace:
    """Test whitespace helpers."""

    def test_collapse_whitespace(self) -> None:
        """Should collapse runs including newlines and tabs."""
        assert collapse_whitespace("  a \n\n b\t\tc  ") == "a b c"

    def test_single_line_replaces_newline_runs(self) -> None:
        """Should replace each newline run with one space."""
        assert single_line(" first\r\nsecond\n\n\nthird ") == "first second third"

    def test_single_line_keeps_inner_spaces(self) -> None:
        """Should not touch runs of plain spaces."""
        assert single_line("a   b") == "a   b"


class TestCounting:
    """Test word counting and rounding."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("", 0), ("   \n ", 0), ("one", 1), ("one  two\nthree\tfour", 4)],
    )
    def test_count_words(self, text: str, expected: int) -> None:
        """Should split on whitespace runs."""
        assert count_words(text) == expected

    @pytest.mark.parametrize(
        ("value", "expected"), [(0.0, 0), (0.4, 0), (0.5, 1), (2.5, 3), (59.7, 60)]
    )
    def test_round_half_up(self, value: float, expected: int) -> None:
        """Should round .5 away from zero for positive values."""
        assert round_half_up(value) == expected
