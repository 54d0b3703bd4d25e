"""Text chart analysis: line classification, transposition and annotations.

This subpackage tags each line of a plain-text chart, transposes chord lines
by a semitone offset and overlays line-anchored performance notes, producing
a per-line render model with no rendering dependency.
"""

from chord_sheet.chart.annotations import AnnotationStore
from chord_sheet.chart.chord_detector import classify_line, classify_lines, find_chords, is_chord
from chord_sheet.chart.chord_reading import ChordReading, read_chord
from chord_sheet.chart.models import (
    Annotation,
    AnnotationColor,
    ChordToken,
    LineType,
    RenderedLine,
    Token,
    color_for_kind,
)
from chord_sheet.chart.render import render_chart, render_line, render_text, transpose_chart
from chord_sheet.chart.tokenizer import split_lines, tokenize_line
from chord_sheet.chart.transposer import format_offset, transpose_line, transpose_token

__all__ = [
    "Annotation",
    "AnnotationColor",
    "AnnotationStore",
    "ChordReading",
    "ChordToken",
    "LineType",
    "RenderedLine",
    "Token",
    "classify_line",
    "classify_lines",
    "color_for_kind",
    "find_chords",
    "format_offset",
    "is_chord",
    "read_chord",
    "render_chart",
    "render_line",
    "render_text",
    "split_lines",
    "tokenize_line",
    "transpose_chart",
    "transpose_line",
    "transpose_token",
]
