# editlens/highlight/words.py
"""
Word-level change boundaries for modified line pairs.

`find_change` reports the single region that differs between two lines as
byte offsets into their UTF-8 encodings, the unit terminal renderers use for
column highlights. `segment_line` turns that region into display runs.
"""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from ..models.blocks import ChangedPair, ChangeSpan

__all__ = ["find_change", "segment_line", "aligned_old_lines"]

Line = Union[str, bytes]


def _as_bytes(line: Line) -> bytes:
    return line if isinstance(line, bytes) else line.encode("utf-8")


def _is_continuation(byte: int) -> bool:
    return byte & 0xC0 == 0x80


def find_change(old_line: Line, new_line: Line) -> Optional[ChangeSpan]:
    """
    Return the minimal differing byte range between two lines, or None when
    they are byte-identical.

    The common prefix and suffix never overlap: ``p + s <= min(len(old), len(new))``,
    which matters when one line is a substring of the other. Both edges are
    kept on UTF-8 character boundaries, so a character whose leading bytes
    happen to match is reported whole.
    """
    a = _as_bytes(old_line)
    b = _as_bytes(new_line)
    if a == b:
        return None

    limit = min(len(a), len(b))
    prefix = 0
    while prefix < limit and a[prefix] == b[prefix]:
        prefix += 1
    while prefix > 0 and _is_continuation((a if prefix < len(a) else b)[prefix]):
        prefix -= 1

    suffix = 0
    max_suffix = limit - prefix
    while suffix < max_suffix and a[len(a) - 1 - suffix] == b[len(b) - 1 - suffix]:
        suffix += 1
    while suffix > 0 and _is_continuation(a[len(a) - suffix]):
        suffix -= 1

    return ChangeSpan(
        old_start=prefix,
        old_end=len(a) - suffix,
        new_start=prefix,
        new_end=len(b) - suffix,
    )


def _snap(data: bytes, start: int, end: int) -> Tuple[int, int]:
    """Widen [start, end) so neither edge falls inside a UTF-8 sequence."""
    while 0 < start < len(data) and _is_continuation(data[start]):
        start -= 1
    while 0 < end < len(data) and _is_continuation(data[end]):
        end += 1
    return start, end


def segment_line(line: str, span: Optional[ChangeSpan], side: str = "new") -> List[Tuple[str, bool]]:
    """
    Split `line` into ``(text, changed)`` runs using the `side` ("old" or "new")
    of `span`. Without a span the whole line is one unchanged run.
    """
    if side not in ("old", "new"):
        raise ValueError("side must be 'old' or 'new'")
    if span is None:
        return [(line, False)]

    data = line.encode("utf-8")
    if side == "new":
        start, end = span.new_start, span.new_end
    else:
        start, end = span.old_start, span.old_end
    start, end = _snap(data, max(0, min(start, len(data))), max(0, min(end, len(data))))

    segments: List[Tuple[str, bool]] = []
    before, changed, after = data[:start], data[start:end], data[end:]
    if before:
        segments.append((before.decode("utf-8"), False))
    if changed:
        segments.append((changed.decode("utf-8"), True))
    if after:
        segments.append((after.decode("utf-8"), False))
    return segments or [(line, False)]


def aligned_old_lines(pairs: Sequence[ChangedPair]) -> Optional[List[Optional[str]]]:
    """
    For every pair that has a new line, the old line it replaces (None for pure
    insertions), in the same order as the filtered new lines. Returns None when
    no pair is a modification, i.e. there is nothing to word-diff.
    """
    aligned: List[Optional[str]] = []
    has_modifications = False
    for pair in pairs:
        if pair.new_line is None:
            continue
        aligned.append(pair.old_line)
        if pair.old_line is not None:
            has_modifications = True
    return aligned if has_modifications else None
