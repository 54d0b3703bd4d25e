"""Chord transposition for chart lines.

Chord symbols are moved by a signed number of semitones and always re-spelled
with sharps. Only the matched chord spans of a line are rewritten; every other
character, whitespace included, is kept as is so chords stay aligned with the
lyric line below.
"""

from __future__ import annotations

import re

from chord_sheet.chart.chord_detector import CHORD_SPAN_RE
from chord_sheet.pitch_class import normalize_offset, note_to_pc, pc_to_note

ROOT_RE = re.compile(r"^([A-G][#b]?)(.*)$", re.DOTALL)


def transpose_token(token: str, semitones: int) -> str:
    """Transpose a single chord symbol.

    Parameters
    ----------
    token : str
        Chord symbol (e.g., "C#m7", "Bb/D").
    semitones : int
        Signed number of semitones; any integer.

    Returns
    -------
    str
        The root moved and spelled with sharps, followed by the rest of the
        symbol as written (a slash bass included), or ``token`` unchanged if
        its root cannot be read.

    Examples
    --------
    >>> transpose_token("C#m7", 2)
    'D#m7'
    >>> transpose_token("Bb", -1)
    'A'
    >>> transpose_token("C/E", 2)
    'D/E'
    >>> transpose_token("H7", 3)
    'H7'
    """
    shift = normalize_offset(semitones)
    if shift == 0:
        return token

    match = ROOT_RE.match(token)
    if not match:
        return token

    root, suffix = match.groups()
    try:
        index = note_to_pc(root)
    except ValueError:
        return token

    return pc_to_note(index + shift) + suffix


def transpose_line(line: str, semitones: int) -> str:
    """Transpose every chord symbol in a line, in place.

    Parameters
    ----------
    line : str
        A line classified as a chord line.
    semitones : int
        Signed number of semitones; any integer.

    Returns
    -------
    str
        The line with chord spans replaced; all other text unchanged.

    Examples
    --------
    >>> transpose_line("G    D    Em", 2)
    'A    E    F#m'
    >>> transpose_line("C  G  Am  F", 0)
    'C  G  Am  F'
    """
    if normalize_offset(semitones) == 0:
        return line
    return CHORD_SPAN_RE.sub(lambda match: transpose_token(match.group(0), semitones), line)


def format_offset(semitones: int) -> str:
    """Format a transposition offset for display.

    Examples
    --------
    >>> format_offset(2)
    '+2'
    >>> format_offset(-1)
    '-1'
    >>> format_offset(0)
    '0'
    """
    return f"+{semitones}" if semitones > 0 else str(semitones)
