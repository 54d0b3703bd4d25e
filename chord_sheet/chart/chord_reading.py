"""Chord tones of chart symbols, read with pychord.

The chart grammar only locates chord symbols; pychord is asked what a symbol
means (its quality name and the notes it sounds). Readings are cached per
symbol, since a chart repeats the same few chords on every render pass.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache

from pychord import Chord as PyChord


@dataclass(frozen=True)
class ChordReading:
    """What a chord symbol sounds.

    Parameters
    ----------
    quality : str
        pychord's quality name ("" for a major triad, "m7", "sus4", ...).
    notes : tuple[str, ...]
        Chord tones as pychord spells them; slash chords include the bass.

    Examples
    --------
    >>> read_chord("Am7")
    ChordReading(quality='m7', notes=('A', 'C', 'E', 'G'))
    """

    quality: str
    notes: tuple[str, ...]


@lru_cache(maxsize=512)
def read_chord(symbol: str) -> ChordReading | None:
    """Read a chord symbol, or return None if pychord does not know it.

    Parameters
    ----------
    symbol : str
        Chord symbol as written (e.g., "C#m7/G#").

    Returns
    -------
    ChordReading | None
        Quality and chord tones, or None for symbols outside pychord's
        vocabulary (e.g., "H7").

    Examples
    --------
    >>> read_chord("C").notes
    ('C', 'E', 'G')
    >>> read_chord("H7") is None
    True
    """
    try:
        chord = PyChord(symbol)
        return ChordReading(quality=str(chord.quality), notes=tuple(chord.components()))
    except Exception:  # pychord raises ValueError and assorted lookup errors
        return None
