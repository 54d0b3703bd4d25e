"""Chord recognition and line classification for text charts.

This module provides the chord grammar (root, optional quality, optional
digits, optional slash bass), a scanner that locates chord symbols inside a
line, and the density heuristic that tags each line of a chart.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Iterable

from chord_sheet.chart.models import ChordToken, LineType
from chord_sheet.chart.tokenizer import tokenize_line

# Constants for line classification
CHORD_LINE_THRESHOLD = 0.5
TAB_RUN_LENGTH = 3
MAX_CHORD_LENGTH = 15

# Words that are valid chord spellings but far more often lyrics.
# Compared against the upper-cased token, so "Am" is excluded as well as "AM".
COMMON_WORDS: frozenset[str] = frozenset(
    {"I", "A", "AM", "SO", "DO", "GO", "TO", "BE", "AT", "ON", "IN"}
)

_ROOT = r"[A-G][#b]?"
_QUALITY = r"(?:maj|min|dim|aug|sus|add|m|M)?[0-9]*"

# Whole-token chord grammar: root, quality, extension digits, slash bass
CHORD_RE = re.compile(rf"^(?P<root>{_ROOT})(?P<quality>{_QUALITY})(?:/(?P<bass>{_ROOT}))?$")

# Same grammar for scanning a line; a root letter inside a word or
# abbreviation ("N.C.") never matches
CHORD_SPAN_RE = re.compile(
    rf"(?<![A-Za-z0-9#.])"
    rf"(?P<root>{_ROOT})(?P<quality>{_QUALITY})(?:/(?P<bass>{_ROOT}))?"
    rf"(?![A-Za-z#])"
)

TAB_RE = re.compile(rf"[-|]{{{TAB_RUN_LENGTH},}}")
HEADER_RE = re.compile(r"^\[.*\]$")


def is_chord(text: str, *, exclusions: Collection[str] = COMMON_WORDS) -> bool:
    """Check if a token is chord-like.

    Parameters
    ----------
    text : str
        The token to check.
    exclusions : Collection[str]
        Upper-case words that never count as chords.

    Returns
    -------
    bool
        True if the token matches the chord grammar and is not excluded.

    Examples
    --------
    >>> is_chord("Gm7")
    True
    >>> is_chord("C/E")
    True
    >>> is_chord("Hello")
    False
    >>> is_chord("A")
    False
    """
    if not text or len(text) > MAX_CHORD_LENGTH:
        return False

    if text.upper() in exclusions:
        return False

    return CHORD_RE.match(text) is not None


def find_chords(line: str) -> list[ChordToken]:
    """Locate every chord symbol in a line.

    Parameters
    ----------
    line : str
        The line to scan.

    Returns
    -------
    list[ChordToken]
        Chord tokens in column order, each with its span and the root,
        quality and bass it was written with.

    Examples
    --------
    >>> [(c.text, c.start) for c in find_chords("G    D/F#  Em")]
    [('G', 0), ('D/F#', 5), ('Em', 11)]
    """
    return [
        ChordToken(
            text=match.group(0),
            start=match.start(),
            end=match.end(),
            root=match.group("root"),
            suffix=match.group("quality"),
            bass=match.group("bass"),
        )
        for match in CHORD_SPAN_RE.finditer(line)
    ]


def classify_line(
    line: str,
    *,
    threshold: float = CHORD_LINE_THRESHOLD,
    exclusions: Collection[str] = COMMON_WORDS,
) -> LineType:
    """Classify a line based on its content.

    Parameters
    ----------
    line : str
        The line to classify.
    threshold : float
        Chord-like token ratio above which the line is a chord line.
    exclusions : Collection[str]
        Upper-case words that never count as chords.

    Returns
    -------
    LineType
        The line classification.

    Examples
    --------
    >>> classify_line("")
    <LineType.EMPTY: 'empty'>
    >>> classify_line("[Chorus]")
    <LineType.HEADER: 'header'>
    >>> classify_line("G  D  Em  C")
    <LineType.CHORD: 'chord'>
    """
    stripped = line.strip()
    if not stripped:
        return LineType.EMPTY

    # Tablature staff: a run of dashes or bars
    if TAB_RE.search(line):
        return LineType.TAB

    # Section header: [Chorus], Verse 1:
    if HEADER_RE.match(stripped) or stripped.endswith(":"):
        return LineType.HEADER

    tokens = tokenize_line(stripped)
    total = len(tokens)
    chord_count = sum(1 for t in tokens if is_chord(t.text, exclusions=exclusions))

    if total > 0 and chord_count / total > threshold:
        return LineType.CHORD

    # All tokens are chords
    if total > 0 and chord_count == total:
        return LineType.CHORD

    return LineType.LYRIC


def classify_lines(lines: Iterable[str]) -> list[LineType]:
    """Classify every line of a chart.

    Examples
    --------
    >>> [t.value for t in classify_lines(["[Verse]", "C  G", "Hello"])]
    ['header', 'chord', 'lyric']
    """
    return [classify_line(line) for line in lines]
