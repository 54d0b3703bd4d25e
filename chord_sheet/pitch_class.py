"""Pitch class tables and note arithmetic.

This module maps the 12 chromatic pitch classes (0-11, C=0) to and from
their sharp and flat spellings, and moves note names by semitones.
"""

from __future__ import annotations

# Pitch class to note name, sharp spelling (the engine's output spelling)
SHARP_NAMES: tuple[str, ...] = ("C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B")

# Pitch class to note name, flat spelling (accepted on input only)
FLAT_NAMES: tuple[str, ...] = ("C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B")

SEMITONES_PER_OCTAVE = 12


def note_to_pc(note: str) -> int:
    """Convert a note name to pitch class (0-11).

    The sharp table is consulted first and the flat table second.

    Parameters
    ----------
    note : str
        Note name (e.g., "C", "F#", "Bb").

    Returns
    -------
    int
        Pitch class (0-11, where C=0).

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> note_to_pc("C")
    0
    >>> note_to_pc("F#")
    6
    >>> note_to_pc("Bb")
    10
    """
    if note in SHARP_NAMES:
        return SHARP_NAMES.index(note)
    if note in FLAT_NAMES:
        return FLAT_NAMES.index(note)
    msg = f"Unknown note: {note}"
    raise ValueError(msg)


def pc_to_note(pc: int, *, flats: bool = False) -> str:
    """Spell a pitch class as a note name.

    Parameters
    ----------
    pc : int
        Pitch class; any integer, taken mod 12.
    flats : bool
        Use flat spelling instead of sharps (default False).

    Returns
    -------
    str
        The note name.

    Examples
    --------
    >>> pc_to_note(1)
    'C#'
    >>> pc_to_note(1, flats=True)
    'Db'
    >>> pc_to_note(-1)
    'B'
    """
    names = FLAT_NAMES if flats else SHARP_NAMES
    return names[pc % SEMITONES_PER_OCTAVE]


def normalize_offset(semitones: int) -> int:
    """Reduce a signed semitone offset to the range 0-11.

    Examples
    --------
    >>> normalize_offset(14)
    2
    >>> normalize_offset(-1)
    11
    """
    return semitones % SEMITONES_PER_OCTAVE


def transpose_note(note: str, semitones: int) -> str:
    """Move a note name by a number of semitones.

    The result is always spelled with sharps.

    Parameters
    ----------
    note : str
        Note name (e.g., "Bb").
    semitones : int
        Number of semitones to move (positive = up).

    Returns
    -------
    str
        The transposed note name.

    Raises
    ------
    ValueError
        If the note name is not recognized.

    Examples
    --------
    >>> transpose_note("Bb", 2)
    'C'
    >>> transpose_note("C", -1)
    'B'
    """
    return pc_to_note(note_to_pc(note) + semitones)
