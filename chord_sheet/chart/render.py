"""Per-line render model for text charts.

This module composes classification, optional transposition and annotation
lookup into the records a presentation layer draws. The chart text is never
modified; transposition here is a read-time projection.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chord_sheet.chart.annotations import AnnotationStore
from chord_sheet.chart.chord_detector import classify_line, find_chords
from chord_sheet.chart.models import LineType, RenderedLine
from chord_sheet.chart.tokenizer import split_lines
from chord_sheet.chart.transposer import transpose_line

logger = logging.getLogger(__name__)


def render_line(
    index: int,
    line: str,
    offset: int = 0,
    annotations: AnnotationStore | None = None,
) -> RenderedLine:
    """Build the render record of one line.

    Parameters
    ----------
    index : int
        Line index in the chart.
    line : str
        The raw line.
    offset : int
        Transposition in semitones, applied to chord lines only.
    annotations : AnnotationStore | None
        Annotations of the chart, if any.

    Returns
    -------
    RenderedLine
        The line's classification, display text, annotation and chords.
    """
    line_type = classify_line(line)
    annotation = annotations.get(index) if annotations is not None else None

    if line_type is not LineType.CHORD:
        return RenderedLine(index=index, type=line_type, text=line, annotation=annotation)

    display = transpose_line(line, offset)
    return RenderedLine(
        index=index,
        type=line_type,
        text=display,
        annotation=annotation,
        chords=tuple(find_chords(display)),
    )


def render_chart(
    lines: Sequence[str],
    offset: int = 0,
    annotations: AnnotationStore | None = None,
) -> list[RenderedLine]:
    """Build the render model of a chart.

    Parameters
    ----------
    lines : Sequence[str]
        The chart's lines, without newline characters.
    offset : int
        Transposition in semitones, applied to chord lines only.
    annotations : AnnotationStore | None
        Annotations of the chart, if any.

    Returns
    -------
    list[RenderedLine]
        One record per line, in order.

    Examples
    --------
    >>> rendered = render_chart(["[Verse]", "C  G  Am  F", "Hello darkness my old friend"], 2)
    >>> [r.type.value for r in rendered]
    ['header', 'chord', 'lyric']
    >>> rendered[1].text
    'D  A  Bm  G'
    """
    rendered = [render_line(i, line, offset, annotations) for i, line in enumerate(lines)]
    logger.debug(
        "Rendered %d lines (%d chord lines) at offset %d",
        len(rendered),
        sum(1 for r in rendered if r.type is LineType.CHORD),
        offset,
    )
    return rendered


def render_text(
    text: str,
    offset: int = 0,
    annotations: AnnotationStore | None = None,
) -> list[RenderedLine]:
    """Split chart text into lines and build its render model."""
    return render_chart(split_lines(text), offset, annotations)


def transpose_chart(text: str, offset: int) -> str:
    """Return chart text with its chord lines transposed.

    This is the text a caller would store to commit a transposition; lines
    of every other type are kept as they are.

    Examples
    --------
    >>> transpose_chart("[Intro]\\nG  C\\nGo tell it", 2)
    '[Intro]\\nA  D\\nGo tell it'
    """
    return "\n".join(r.text for r in render_text(text, offset))
