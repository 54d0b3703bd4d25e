"""Command line front end for chart analysis.

Usage:
    chord-sheet classify <input_file>
    chord-sheet transpose <input_file> -s <semitones>
    chord-sheet render <input_file> [-s <semitones>] [--annotations FILE] [--json]

``-`` reads the chart from stdin.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from chord_sheet import __version__
from chord_sheet.chart import (
    AnnotationStore,
    RenderedLine,
    classify_lines,
    format_offset,
    render_text,
    split_lines,
    transpose_chart,
)

logger = logging.getLogger(__name__)


def read_chart(source: str) -> str:
    """Read chart text from a path, or stdin for ``-``."""
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def load_annotations(path: Path | None) -> AnnotationStore:
    """Load an annotation store from a JSON list of stored annotations."""
    if path is None:
        return AnnotationStore()
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        msg = f"Expected a JSON list of annotations in {path}"
        raise ValueError(msg)
    store = AnnotationStore.from_dicts(data)
    logger.debug("Loaded %d annotations from %s", len(store), path)
    return store


def rendered_line_to_dict(line: RenderedLine) -> dict[str, Any]:
    """Convert a RenderedLine to a JSON-serializable dict."""
    result: dict[str, Any] = {
        "index": line.index,
        "type": line.type.value,
        "text": line.text,
        "annotation": line.annotation.to_dict() if line.annotation else None,
    }
    if line.chords:
        result["chords"] = [
            {
                "text": token.text,
                "position": token.start,
                "quality": token.reading.quality if token.reading else None,
                "notes": list(token.reading.notes) if token.reading else [],
            }
            for token in line.chords
        ]
    return result


def format_rendered_line(line: RenderedLine) -> str:
    """Format a RenderedLine as plain text, with its annotation after the line."""
    if line.annotation is None:
        return line.text
    return f"{line.text}    [{line.annotation.color.value}: {line.annotation.text}]"


def _cmd_classify(args: argparse.Namespace) -> int:
    lines = split_lines(read_chart(args.input))
    for line_type, line in zip(classify_lines(lines), lines):
        print(f"{line_type.value.upper()}\t{line}")
    return 0


def _cmd_transpose(args: argparse.Namespace) -> int:
    print(transpose_chart(read_chart(args.input), args.semitones))
    return 0


def _cmd_render(args: argparse.Namespace) -> int:
    store = load_annotations(args.annotations)
    rendered = render_text(read_chart(args.input), args.semitones, store)
    if args.json:
        data = {
            "offset": format_offset(args.semitones),
            "lines": [rendered_line_to_dict(line) for line in rendered],
        }
        print(json.dumps(data, indent=2))
    else:
        for line in rendered:
            print(format_rendered_line(line))
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="chord-sheet",
        description="Classify, transpose and render plain-text chord charts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s classify song.txt
  %(prog)s transpose song.txt -s -2
  %(prog)s render song.txt -s 3 --annotations notes.json --json
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    classify = subparsers.add_parser("classify", help="Print each line with its type")
    classify.add_argument("input", help="Chart file, or - for stdin")
    classify.set_defaults(func=_cmd_classify)

    transpose = subparsers.add_parser("transpose", help="Print the chart with chord lines transposed")
    transpose.add_argument("input", help="Chart file, or - for stdin")
    transpose.add_argument("-s", "--semitones", type=int, required=True, help="Signed semitone offset")
    transpose.set_defaults(func=_cmd_transpose)

    render = subparsers.add_parser("render", help="Print the render model")
    render.add_argument("input", help="Chart file, or - for stdin")
    render.add_argument("-s", "--semitones", type=int, default=0, help="Signed semitone offset")
    render.add_argument("--annotations", type=Path, default=None, help="JSON file of annotations")
    render.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    render.set_defaults(func=_cmd_render)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        return args.func(args)
    except (OSError, KeyError, TypeError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
