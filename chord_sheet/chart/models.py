"""Data models for chart analysis.

This module defines the line classification tag, the column-aware tokens
found in a chart line, line-anchored annotations and the per-line records
handed to a presentation layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cached_property

from chord_sheet.chart.chord_reading import ChordReading, read_chord


class LineType(str, Enum):
    """Classification of a single chart line."""

    CHORD = "chord"
    TAB = "tab"
    HEADER = "header"
    LYRIC = "lyric"
    EMPTY = "empty"


class AnnotationColor(str, Enum):
    """Badge colour of an annotation."""

    YELLOW = "yellow"
    RED = "red"
    BLUE = "blue"
    GREEN = "green"


# Annotation kind to the colour it is shown with
KIND_COLORS: dict[str, AnnotationColor] = {
    "note": AnnotationColor.YELLOW,
    "cue": AnnotationColor.BLUE,
    "warning": AnnotationColor.RED,
    "question": AnnotationColor.GREEN,
}


def color_for_kind(kind: str) -> AnnotationColor:
    """Return the badge colour for an annotation kind.

    Raises
    ------
    ValueError
        If the kind is not one of "note", "cue", "warning", "question".

    Examples
    --------
    >>> color_for_kind("cue")
    <AnnotationColor.BLUE: 'blue'>
    """
    if kind in KIND_COLORS:
        return KIND_COLORS[kind]
    msg = f"Unknown annotation kind: {kind}"
    raise ValueError(msg)


@dataclass(frozen=True)
class Token:
    """A whitespace-delimited token with column span information.

    Parameters
    ----------
    text : str
        The token text content.
    start : int
        Inclusive start column (0-indexed).
    end : int
        Exclusive end column.

    Examples
    --------
    >>> token = Token(text="Gm7", start=0, end=3)
    >>> token.start, token.end
    (0, 3)
    """

    text: str
    start: int
    end: int


@dataclass(frozen=True)
class ChordToken:
    """A chord symbol located inside a chart line.

    Parameters
    ----------
    text : str
        The matched chord text (e.g., "C#m7/G#").
    start : int
        Inclusive start column in the line.
    end : int
        Exclusive end column in the line.
    root : str
        Root note as written (e.g., "C#", "Bb").
    suffix : str
        Quality/extension text between root and slash, possibly empty.
    bass : str | None
        Slash bass note as written, or None.
    """

    text: str
    start: int
    end: int
    root: str
    suffix: str = ""
    bass: str | None = None

    @cached_property
    def reading(self) -> ChordReading | None:
        """Quality and chord tones of the symbol, read on first access."""
        return read_chord(self.text)


@dataclass(frozen=True)
class Annotation:
    """A performance note attached to one line of a chart.

    Parameters
    ----------
    id : str
        Opaque identifier.
    line_index : int
        Positional index of the annotated line.
    text : str
        The note text.
    color : AnnotationColor
        Badge colour.
    """

    id: str
    line_index: int
    text: str
    color: AnnotationColor = AnnotationColor.YELLOW

    def to_dict(self) -> dict[str, object]:
        """Return the stored shape of this annotation."""
        return {
            "id": self.id,
            "lineIndex": self.line_index,
            "text": self.text,
            "color": self.color.value,
        }


@dataclass(frozen=True)
class RenderedLine:
    """One line of the render model.

    Parameters
    ----------
    index : int
        Line index in the chart.
    type : LineType
        Classification of the original line.
    text : str
        Display text; transposed for chord lines, otherwise the original.
    annotation : Annotation | None
        Annotation attached to this line index, if any.
    chords : tuple[ChordToken, ...]
        Chord symbols in the display text (chord lines only).
    """

    index: int
    type: LineType
    text: str
    annotation: Annotation | None = None
    chords: tuple[ChordToken, ...] = ()
