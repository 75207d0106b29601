from .align import filter_unchanged_lines
from .apply import apply_hunks
from .builder import build_diff_blocks, extract_hunks, minimize_diff_blocks

__all__ = [
    "apply_hunks",
    "build_diff_blocks",
    "extract_hunks",
    "filter_unchanged_lines",
    "minimize_diff_blocks",
]
