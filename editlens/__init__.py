from .config import PreviewConfig
from .core import HunkPreview, Preview, preview_edit
from .documents import load_document_lines, read_document_lines
from .errors import (
    ConfigError,
    DocumentReadError,
    EditLensError,
    HunkMismatchError,
    ProposalError,
)
from .highlight import aligned_old_lines, find_change, segment_line
from .hunks import (
    apply_hunks,
    build_diff_blocks,
    extract_hunks,
    filter_unchanged_lines,
    minimize_diff_blocks,
)
from .locate import find_all_matches
from .models import (
    ChangedPair,
    ChangeSpan,
    DiffBlock,
    EditProposal,
    FilteredLines,
    Hunk,
    Match,
    has_diff_content,
)
from .navigate import (
    Direction,
    HunkNavigator,
    Viewport,
    anchors_from_hunks,
    anchors_from_markers,
    suggest_viewport,
)

__all__ = [
    "preview_edit",
    "Preview",
    "HunkPreview",
    "PreviewConfig",
    "find_all_matches",
    "extract_hunks",
    "build_diff_blocks",
    "minimize_diff_blocks",
    "filter_unchanged_lines",
    "apply_hunks",
    "find_change",
    "segment_line",
    "aligned_old_lines",
    "HunkNavigator",
    "Direction",
    "Viewport",
    "anchors_from_markers",
    "anchors_from_hunks",
    "suggest_viewport",
    "read_document_lines",
    "load_document_lines",
    "EditProposal",
    "has_diff_content",
    "Match",
    "DiffBlock",
    "Hunk",
    "ChangedPair",
    "ChangeSpan",
    "FilteredLines",
    "EditLensError",
    "ConfigError",
    "DocumentReadError",
    "HunkMismatchError",
    "ProposalError",
]
