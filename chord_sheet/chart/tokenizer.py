"""Column-aware tokenizer for chart lines.

Splitting keeps the column span of each token, so callers can relate a token
back to its position in monospace text.
"""

import re

from chord_sheet.chart.models import Token

_TOKEN_RE = re.compile(r"\S+")


def tokenize_line(line: str) -> list[Token]:
    """Return the whitespace-delimited runs of ``line`` with their columns.

    Examples
    --------
    >>> [(t.text, t.start, t.end) for t in tokenize_line("Gm     C")]
    [('Gm', 0, 2), ('C', 7, 8)]
    """
    return [Token(text=m.group(), start=m.start(), end=m.end()) for m in _TOKEN_RE.finditer(line)]


def split_lines(text: str) -> list[str]:
    """Split chart text into lines.

    Normalizes line endings and otherwise keeps every line's content as is.

    Examples
    --------
    >>> split_lines("[Verse]\\r\\nG  C")
    ['[Verse]', 'G  C']
    >>> split_lines("")
    ['']
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    return text.split("\n")
