from .blocks import ChangedPair, ChangeSpan, DiffBlock, FilteredLines, Hunk, Match
from .proposal import EditProposal, has_diff_content

__all__ = [
    "ChangedPair",
    "ChangeSpan",
    "DiffBlock",
    "FilteredLines",
    "Hunk",
    "Match",
    "EditProposal",
    "has_diff_content",
]
