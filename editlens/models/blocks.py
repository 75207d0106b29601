# editlens/models/blocks.py
from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class Match:
    """An inclusive, 1-indexed line range where a pattern was located."""

    start_line: int
    end_line: int
    strategy: str = "exact"  # "exact", "substring" or "loose"
    # Substring matches carry the rewritten line (first occurrence replaced).
    replacement: Optional[str] = None


@dataclass
class DiffBlock:
    """Raw region affected by one match, before minimization."""

    start_line: int
    end_line: int
    old_lines: List[str] = field(default_factory=list)
    new_lines: List[str] = field(default_factory=list)

    @property
    def is_insertion(self) -> bool:
        return not self.old_lines

    @property
    def is_deletion(self) -> bool:
        return bool(self.old_lines) and not self.new_lines


@dataclass
class Hunk(DiffBlock):
    """
    A minimized DiffBlock: the smallest contiguous region that differs.

    Pure insertions have ``old_lines == []`` and ``end_line == start_line - 1``;
    ``start_line`` is then the line the new content is inserted before.
    """

    @property
    def kind(self) -> str:
        if self.is_insertion:
            return "insertion"
        if self.is_deletion:
            return "deletion"
        return "modification"

    @classmethod
    def from_block(cls, block: DiffBlock) -> "Hunk":
        return cls(
            start_line=block.start_line,
            end_line=block.end_line,
            old_lines=list(block.old_lines),
            new_lines=list(block.new_lines),
        )


@dataclass
class ChangedPair:
    """One aligned unit from a line-level diff (indices are 1-indexed)."""

    old_idx: Optional[int] = None
    new_idx: Optional[int] = None
    old_line: Optional[str] = None
    new_line: Optional[str] = None

    @property
    def is_modification(self) -> bool:
        return self.old_idx is not None and self.new_idx is not None


@dataclass
class ChangeSpan:
    """Half-open byte ranges that differ between an old and a new line."""

    old_start: int
    old_end: int
    new_start: int
    new_end: int


@dataclass
class FilteredLines:
    """Changed lines only, plus the pairs they came from."""

    old_lines: List[str] = field(default_factory=list)
    new_lines: List[str] = field(default_factory=list)
    pairs: List[ChangedPair] = field(default_factory=list)

    def __iter__(self) -> Iterator:
        # Allows `old, new, pairs = filter_unchanged_lines(a, b)`.
        return iter((self.old_lines, self.new_lines, self.pairs))
