# editlens/hunks/apply.py
from __future__ import annotations

from typing import List, Sequence

from ..errors import HunkMismatchError
from ..models.blocks import Hunk

__all__ = ["apply_hunks"]


def apply_hunks(document_lines: Sequence[str], hunks: Sequence[Hunk], *, verify: bool = True) -> List[str]:
    """
    Splice every hunk's new lines over its old range and return the new document.

    Hunks are applied bottom to top so earlier line numbers stay valid. With
    `verify`, a hunk whose old lines differ from the document raises
    HunkMismatchError and nothing is returned.
    """
    lines = list(document_lines)
    # Ties (insertions before the same line) go in reverse list order so the
    # earlier hunk ends up on top.
    ordered = sorted(enumerate(hunks), key=lambda ih: (ih[1].start_line, ih[1].end_line, ih[0]), reverse=True)
    for _i, h in ordered:
        lo = h.start_line - 1
        hi = h.end_line if h.old_lines else lo
        if verify and lines[lo:hi] != list(h.old_lines):
            raise HunkMismatchError(
                f"Hunk at line {h.start_line} expects {len(h.old_lines)} line(s) that are not in the document"
            )
        lines[lo:hi] = list(h.new_lines)
    return lines
