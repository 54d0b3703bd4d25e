"""Line-anchored annotation store.

Each chart editing session owns one ``AnnotationStore``. It holds at most one
annotation per line index; saving a note on an occupied line replaces the
previous one. Line indices are positional and are not renumbered when lines
are inserted or removed elsewhere in the chart.

The store is not thread-safe.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from chord_sheet.chart.models import Annotation, AnnotationColor

logger = logging.getLogger(__name__)


def _new_id() -> str:
    return uuid.uuid4().hex


def _coerce_color(color: AnnotationColor | str) -> AnnotationColor:
    try:
        return AnnotationColor(color)
    except ValueError:
        msg = f"Unknown annotation color: {color}"
        raise ValueError(msg) from None


class AnnotationStore:
    """Annotations of one chart, keyed by line index.

    Examples
    --------
    >>> store = AnnotationStore()
    >>> _ = store.upsert(3, "note A")
    >>> _ = store.upsert(3, "note B")
    >>> len(store), store.get(3).text
    (1, 'note B')
    """

    def __init__(self, annotations: Iterable[Annotation] = ()) -> None:
        self._by_line: dict[int, Annotation] = {}
        for annotation in annotations:
            self._by_line[annotation.line_index] = annotation

    def upsert(
        self,
        line_index: int,
        text: str,
        color: AnnotationColor | str = AnnotationColor.YELLOW,
        *,
        annotation_id: str | None = None,
    ) -> Annotation:
        """Attach a note to a line, replacing any note already there.

        Parameters
        ----------
        line_index : int
            Index of the annotated line. Not checked against the chart length.
        text : str
            The note text.
        color : AnnotationColor | str
            Badge colour, as an enum member or its value.
        annotation_id : str | None
            Identifier to use; a fresh one is generated when omitted.

        Returns
        -------
        Annotation
            The stored annotation.

        Raises
        ------
        ValueError
            If ``color`` is not a known colour.
        """
        annotation = Annotation(
            id=annotation_id or _new_id(),
            line_index=line_index,
            text=text,
            color=_coerce_color(color),
        )
        previous = self._by_line.get(line_index)
        if previous is not None:
            logger.debug("Replacing annotation %s on line %d", previous.id, line_index)
        self._by_line[line_index] = annotation
        return annotation

    def delete(self, annotation_id: str) -> None:
        """Remove the annotation with this id; does nothing if there is none."""
        for line_index, annotation in self._by_line.items():
            if annotation.id == annotation_id:
                del self._by_line[line_index]
                logger.debug("Deleted annotation %s on line %d", annotation_id, line_index)
                return

    def get(self, line_index: int) -> Annotation | None:
        """Return the annotation on a line, or None."""
        return self._by_line.get(line_index)

    def clear(self) -> None:
        """Remove every annotation."""
        self._by_line.clear()

    def __len__(self) -> int:
        return len(self._by_line)

    def __contains__(self, line_index: object) -> bool:
        return line_index in self._by_line

    def __iter__(self) -> Iterator[Annotation]:
        """Iterate annotations ordered by line index.

        The order is by line, not the order the notes were added, so an
        exported list may differ in order from the one it was loaded from.
        """
        return iter([self._by_line[i] for i in sorted(self._by_line)])

    def to_dicts(self) -> list[dict[str, Any]]:
        """Return the annotations in their stored shape, ordered by line index."""
        return [annotation.to_dict() for annotation in self]

    @classmethod
    def from_dicts(cls, items: Iterable[Mapping[str, Any]]) -> AnnotationStore:
        """Load annotations from their stored shape.

        Each item needs ``lineIndex`` and ``text``; ``id`` and ``color`` are
        optional. A later item on the same line replaces an earlier one.

        Raises
        ------
        KeyError
            If an item lacks ``lineIndex`` or ``text``.
        ValueError
            If an item has an unknown colour.
        """
        store = cls()
        for item in items:
            store.upsert(
                int(item["lineIndex"]),
                str(item["text"]),
                item.get("color", AnnotationColor.YELLOW),
                annotation_id=str(item["id"]) if item.get("id") else None,
            )
        return store
