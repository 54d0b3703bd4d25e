"""Tests for chord transposition."""

import pytest

from chord_sheet.chart.transposer import format_offset, transpose_line, transpose_token

# Lines spelled with sharps and naturals only, so transposition round-trips
SHARP_LINES = [
    "G  D  Em  C",
    "C#m7/G#   F#sus4",
    "  Am7   D7/F#  Gmaj7  ",
    "A#dim  Baug  C5  Dadd9",
    "G  N.C.  D  (x2)",
]

OFFSETS = [-13, -5, -1, 1, 2, 7, 11, 25]


class TestTransposeToken:
    """Test single chord transposition."""

    @pytest.mark.parametrize(
        ("token", "semitones", "expected"),
        [
            ("C", 2, "D"),
            ("B", 1, "C"),
            ("C", -1, "B"),
            ("E", 1, "F"),
            ("G", 14, "A"),
            ("G", -14, "F"),
            ("Bb", 2, "C"),
            ("Eb", 1, "E"),
            ("Db", 1, "D"),
            ("Ebm7", 2, "Fm7"),
            ("F#m", 3, "Am"),
            ("Cmaj7", 5, "Fmaj7"),
            ("Gsus4", -2, "Fsus4"),
            ("C#m7/G#", 1, "Dm7/G#"),
            ("C/E", 2, "D/E"),
            ("Bb/D", -1, "A/D"),
        ],
    )
    def test_transpose(self, token: str, semitones: int, expected: str) -> None:
        """Test transposing chord symbols."""
        assert transpose_token(token, semitones) == expected

    def test_flats_respelled_as_sharps(self) -> None:
        """Test that results are always spelled with sharps."""
        assert transpose_token("Ab", 2) == "A#"
        assert transpose_token("C", 3) == "D#"

    @pytest.mark.parametrize("semitones", [0, 12, -12, 24])
    def test_octave_offset_is_identity(self, semitones: int) -> None:
        """Test that offsets of whole octaves leave the token as written."""
        assert transpose_token("Bbm7", semitones) == "Bbm7"

    @pytest.mark.parametrize("token", ["H7", "", "x", "Cb", "Fb7", "c"])
    def test_unknown_root_unchanged(self, token: str) -> None:
        """Test that tokens without a known root are returned unchanged."""
        assert transpose_token(token, 3) == token

    @pytest.mark.parametrize(
        ("token", "semitones", "expected"),
        [("C/E", 2, "D/E"), ("G/B", -2, "F/B"), ("Am7/G", 3, "Cm7/G"), ("C/H", 2, "D/H")],
    )
    def test_slash_bass_kept(self, token: str, semitones: int, expected: str) -> None:
        """Test that only the root moves and the slash bass stays as written."""
        assert transpose_token(token, semitones) == expected


class TestTransposeLine:
    """Test in-place transposition of chord lines."""

    def test_whitespace_preserved(self) -> None:
        """Test that column spacing between chords is kept."""
        assert transpose_line("G    D    Em", 2) == "A    E    F#m"

    def test_leading_and_trailing_whitespace(self) -> None:
        """Test that surrounding whitespace is kept."""
        assert transpose_line("   C   G  ", 1) == "   C#   G#  "

    def test_tabs_preserved(self) -> None:
        """Test that tab characters between chords are kept."""
        assert transpose_line("C\tF\t\tG", 2) == "D\tG\t\tA"

    def test_slash_chords(self) -> None:
        """Test slash chords within a line."""
        assert transpose_line("C  G/B  Am  C/G", 2) == "D  A/B  Bm  D/G"

    def test_non_chord_text_untouched(self) -> None:
        """Test that annotations in a chord line are not rewritten."""
        assert transpose_line("G  D  (x2)  N.C.", 2) == "A  E  (x2)  N.C."

    def test_words_untouched(self) -> None:
        """Test that capital letters inside words are not transposed."""
        assert transpose_line("Dsus4  Bass  End", 2) == "Esus4  Bass  End"

    def test_empty_line(self) -> None:
        """Test that an empty line stays empty."""
        assert transpose_line("", 5) == ""

    def test_flats_come_back_as_sharps(self) -> None:
        """Test that flat spellings do not survive a round trip."""
        assert transpose_line(transpose_line("Bb  Eb", 1), -1) == "A#  D#"


class TestTranspositionProperties:
    """Test identity, periodicity and invertibility."""

    @pytest.mark.parametrize("line", [*SHARP_LINES, "Bb  Eb  Ab", "Hello world"])
    def test_identity(self, line: str) -> None:
        """Test that a zero offset returns the line unchanged."""
        assert transpose_line(line, 0) == line

    @pytest.mark.parametrize("line", [*SHARP_LINES, "Bb  Eb  Ab"])
    @pytest.mark.parametrize("semitones", [0, *OFFSETS])
    def test_periodic(self, line: str, semitones: int) -> None:
        """Test that offsets a whole octave apart agree."""
        assert transpose_line(line, semitones) == transpose_line(line, semitones + 12)

    @pytest.mark.parametrize("line", SHARP_LINES)
    @pytest.mark.parametrize("semitones", OFFSETS)
    def test_invertible(self, line: str, semitones: int) -> None:
        """Test that opposite offsets cancel."""
        assert transpose_line(transpose_line(line, semitones), -semitones) == line


class TestFormatOffset:
    """Test offset labels."""

    @pytest.mark.parametrize(
        ("semitones", "expected"),
        [(0, "0"), (1, "+1"), (12, "+12"), (-3, "-3")],
    )
    def test_format(self, semitones: int, expected: str) -> None:
        """Test that positive offsets carry a plus sign."""
        assert format_offset(semitones) == expected
