"""Chord sheet analysis and transposition engine.

This library reads plain-text band charts, tags every line as a chord row,
tab row, section header, lyric row or blank line, transposes chord rows by a
semitone offset and overlays line-anchored performance notes.

Examples
--------
>>> from chord_sheet import AnnotationStore, render_chart, transpose_line

>>> transpose_line("G    D    Em", 2)
'A    E    F#m'

>>> store = AnnotationStore()
>>> _ = store.upsert(1, "Watch the tempo")
>>> lines = render_chart(["[Verse]", "C  G  Am  F"], offset=2, annotations=store)
>>> lines[1].text, lines[1].annotation.text
('D  A  Bm  G', 'Watch the tempo')
"""

from chord_sheet.chart import (
    Annotation,
    AnnotationColor,
    AnnotationStore,
    ChordReading,
    ChordToken,
    LineType,
    RenderedLine,
    classify_line,
    read_chord,
    render_chart,
    render_text,
    transpose_chart,
    transpose_line,
    transpose_token,
)

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "AnnotationColor",
    "AnnotationStore",
    "ChordReading",
    "ChordToken",
    "LineType",
    "RenderedLine",
    "classify_line",
    "read_chord",
    "render_chart",
    "render_text",
    "transpose_chart",
    "transpose_line",
    "transpose_token",
]
