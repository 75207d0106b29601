# editlens/navigate/navigator.py
"""
Next/previous movement between rendered hunks.

The rendering layer knows which lines it painted as deleted; it hands those
rows to HunkNavigator, which reduces them to one anchor line per hunk and
caches the result per document until the diff display is cleared.
All line numbers here are 1-indexed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Union

from ..config import PreviewConfig
from ..models.blocks import Hunk

__all__ = [
    "Direction",
    "Viewport",
    "HunkNavigator",
    "anchors_from_markers",
    "anchors_from_hunks",
    "suggest_viewport",
]

log = logging.getLogger(__name__)

Markers = Union[Iterable[int], Callable[[], Iterable[int]]]


class Direction(str, Enum):
    NEXT = "next"
    PREV = "prev"


class Viewport(str, Enum):
    TOP = "top"
    CENTER = "center"


def anchors_from_markers(
    deleted_rows: Iterable[int],
    insertion_rows: Iterable[int] = (),
    fallback: int = 1,
) -> List[int]:
    """
    One anchor per run of consecutive deleted lines (its first line).

    With no deleted lines at all, the insertion rows are used as anchors, and
    with none of those either, the single `fallback` line.
    """
    positions: List[int] = []
    prev = None
    for row in sorted(set(deleted_rows)):
        if prev is None or row > prev + 1:
            positions.append(row)
        prev = row

    if not positions:
        positions = sorted(set(insertion_rows))
    if not positions:
        positions = [fallback]
    return positions


def anchors_from_hunks(hunks: Sequence[Hunk], fallback: int = 1) -> List[int]:
    """Anchors for a hunk list: the first deleted line of every hunk that deletes."""
    positions = sorted({h.start_line for h in hunks if h.old_lines})
    return positions or [fallback]


def suggest_viewport(anchor_size_in_lines: int, window_height: int, threshold: float = 0.5) -> Viewport:
    """Hunks taller than `threshold` of the window go to the top, others are centered."""
    return Viewport.TOP if anchor_size_in_lines > window_height * threshold else Viewport.CENTER


@dataclass
class _AnchorCache:
    positions: List[int]
    current_index: Optional[int] = None


class HunkNavigator:
    """
    Per-document anchor cache with wraparound navigation.

    Not thread-safe: a host calling it from several threads must serialize
    access per document id.
    """

    def __init__(self, config: Optional[PreviewConfig] = None):
        self.config = config or PreviewConfig()
        self._cache: Dict[Hashable, _AnchorCache] = {}

    def is_ready(self, document_id: Hashable) -> bool:
        return document_id in self._cache

    def anchors(
        self,
        document_id: Hashable,
        markers: Optional[Markers] = None,
        insertion_markers: Iterable[int] = (),
    ) -> List[int]:
        """
        Cached anchors for the document, computing them from `markers` on a miss.

        `markers` are the deleted-line rows the renderer painted, given directly
        or as a callable that is only invoked on a cache miss. Without a cache
        entry or markers the document has no anchors.
        """
        entry = self._cache.get(document_id)
        if entry is not None:
            return list(entry.positions)
        if markers is None:
            return []

        rows = markers() if callable(markers) else markers
        positions = anchors_from_markers(rows, insertion_markers)
        self._cache[document_id] = _AnchorCache(positions=positions)
        log.debug("cached %d hunk anchor(s) for %r", len(positions), document_id)
        return list(positions)

    def navigate(
        self,
        document_id: Hashable,
        direction: Union[Direction, str],
        cursor_line: Optional[int] = None,
    ) -> Optional[int]:
        """
        Line of the next or previous hunk, wrapping around at either end.

        Position comes from `cursor_line` when given, else from the last anchor
        this navigator selected. Returns None when there is nothing to navigate.
        """
        direction = Direction(direction)
        entry = self._cache.get(document_id)
        if entry is None or not entry.positions:
            log.debug("no hunk anchors for %r", document_id)
            return None

        anchors = entry.positions
        n = len(anchors)

        if cursor_line is not None:
            current, on_anchor = -1, False
            for i, anchor in enumerate(anchors):
                if anchor == cursor_line:
                    current, on_anchor = i, True
                    break
                if anchor < cursor_line:
                    current = i
                else:
                    break
        elif entry.current_index is not None:
            current, on_anchor = entry.current_index, True
        else:
            current, on_anchor = -1, False

        if direction is Direction.NEXT:
            new_index = (current + 1) % n
        elif on_anchor:
            new_index = n - 1 if current <= 0 else current - 1
        else:
            new_index = n - 1 if current < 0 else current

        entry.current_index = new_index
        return anchors[new_index]

    def invalidate(self, document_id: Hashable) -> None:
        """Forget the anchors of a document whose diff display was cleared or replaced."""
        self._cache.pop(document_id, None)

    def viewport(self, anchor_size_in_lines: int, window_height: int) -> Optional[Viewport]:
        """`suggest_viewport` under this navigator's config; None when centering is off."""
        if not self.config.center_on_navigate:
            return None
        return suggest_viewport(anchor_size_in_lines, window_height, self.config.viewport_threshold)
