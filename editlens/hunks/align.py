# editlens/hunks/align.py
from __future__ import annotations

import difflib
from typing import List, Sequence, Tuple

from ..models.blocks import ChangedPair, FilteredLines

__all__ = ["filter_unchanged_lines", "line_opcodes"]

Opcode = Tuple[str, int, int, int, int]


def line_opcodes(old_lines: Sequence[str], new_lines: Sequence[str]) -> List[Opcode]:
    """
    Zero-context line diff: the non-equal opcodes of a SequenceMatcher run.
    Indices are 0-based and half-open, as difflib reports them.
    """
    sm = difflib.SequenceMatcher(None, list(old_lines), list(new_lines), autojunk=False)
    return [op for op in sm.get_opcodes() if op[0] != "equal"]


def filter_unchanged_lines(old_lines: Sequence[str], new_lines: Sequence[str]) -> FilteredLines:
    """
    Align two line sequences and keep only what changed.

    Within each changed region, old and new lines are paired positionally;
    pairs with equal text are dropped, differing pairs become modifications,
    and whatever is left over on either side becomes a deletion or insertion.
    Indices in the returned pairs are 1-based positions in the inputs.
    """
    result = FilteredLines()
    if "\n".join(old_lines) == "\n".join(new_lines):
        return result

    for _tag, i1, i2, j1, j2 in line_opcodes(old_lines, new_lines):
        count_a = i2 - i1
        count_b = j2 - j1
        pair_count = min(count_a, count_b)

        for k in range(pair_count):
            old_line = old_lines[i1 + k]
            new_line = new_lines[j1 + k]
            if old_line != new_line:
                result.old_lines.append(old_line)
                result.new_lines.append(new_line)
                result.pairs.append(ChangedPair(i1 + k + 1, j1 + k + 1, old_line, new_line))

        for k in range(pair_count, count_a):
            old_line = old_lines[i1 + k]
            result.old_lines.append(old_line)
            result.pairs.append(ChangedPair(old_idx=i1 + k + 1, old_line=old_line))

        for k in range(pair_count, count_b):
            new_line = new_lines[j1 + k]
            result.new_lines.append(new_line)
            result.pairs.append(ChangedPair(new_idx=j1 + k + 1, new_line=new_line))

    return result
