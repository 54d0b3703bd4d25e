"""Tests for the chart line tokenizer."""

import pytest

from chord_sheet.chart.tokenizer import split_lines, tokenize_line


class TestTokenizeLineBasic:
    """Basic tokenization tests."""

    def test_simple_tokens(self) -> None:
        """Test basic two-token line."""
        tokens = tokenize_line("Gm     C")
        assert [t.text for t in tokens] == ["Gm", "C"]

    def test_token_spans(self) -> None:
        """Test that token spans are correct."""
        tokens = tokenize_line("Gm     C")
        assert (tokens[0].start, tokens[0].end) == (0, 2)
        assert (tokens[1].start, tokens[1].end) == (7, 8)

    def test_punctuation_attached(self) -> None:
        """Punctuation stays attached to word."""
        tokens = tokenize_line("Hello, world!")
        assert [t.text for t in tokens] == ["Hello,", "world!"]


class TestTokenizeLineWhitespace:
    """Whitespace handling tests."""

    def test_leading_spaces(self) -> None:
        """Test line with leading spaces."""
        tokens = tokenize_line("   Hello")
        assert len(tokens) == 1
        assert (tokens[0].start, tokens[0].end) == (3, 8)

    @pytest.mark.parametrize("line", ["", "     ", "\t \t"])
    def test_blank_lines(self, line: str) -> None:
        """Test that blank lines have no tokens."""
        assert tokenize_line(line) == []

    @pytest.mark.parametrize(
        ("line", "expected_spans"),
        [
            ("A", [(0, 1)]),
            (" A", [(1, 2)]),
            ("A B", [(0, 1), (2, 3)]),
            ("  A  B  ", [(2, 3), (5, 6)]),
            ("Gm7 C/E", [(0, 3), (4, 7)]),
        ],
    )
    def test_span_calculations(self, line: str, expected_spans: list[tuple[int, int]]) -> None:
        """Test various span calculations."""
        assert [(t.start, t.end) for t in tokenize_line(line)] == expected_spans


class TestSplitLines:
    """Test splitting chart text into lines."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("a\nb", ["a", "b"]),
            ("a\r\nb", ["a", "b"]),
            ("a\rb", ["a", "b"]),
            ("a\n\nb", ["a", "", "b"]),
            ("", [""]),
            ("  G   C  \n", ["  G   C  ", ""]),
        ],
    )
    def test_split(self, text: str, expected: list[str]) -> None:
        """Test line ending normalization."""
        assert split_lines(text) == expected
