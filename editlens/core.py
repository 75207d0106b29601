# editlens/core.py
import logging
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Union

from .config import PreviewConfig
from .documents import Buffers, load_document_lines
from .errors import ProposalError
from .highlight.words import find_change
from .hunks.align import filter_unchanged_lines
from .hunks.builder import extract_hunks
from .models.blocks import ChangedPair, ChangeSpan, Hunk
from .models.proposal import EditProposal
from .navigate.navigator import anchors_from_hunks

logger = logging.getLogger(__name__)


@dataclass
class HunkPreview:
    """A hunk plus the per-line alignment a renderer needs for word highlights."""

    hunk: Hunk
    pairs: List[ChangedPair] = field(default_factory=list)
    # One entry per pair; None for pure insertions/deletions.
    spans: List[Optional[ChangeSpan]] = field(default_factory=list)


@dataclass
class Preview:
    """Everything needed to show one proposal against the current document."""

    path: str
    items: List[HunkPreview] = field(default_factory=list)

    @property
    def hunks(self) -> List[Hunk]:
        return [item.hunk for item in self.items]

    @property
    def is_empty(self) -> bool:
        return not self.items

    def anchors(self, fallback: int = 1) -> List[int]:
        return anchors_from_hunks(self.hunks, fallback=fallback)


def _hunk_preview(hunk: Hunk) -> HunkPreview:
    filtered = filter_unchanged_lines(hunk.old_lines, hunk.new_lines)
    spans: List[Optional[ChangeSpan]] = []
    for pair in filtered.pairs:
        if pair.is_modification:
            spans.append(find_change(pair.old_line, pair.new_line))
        else:
            spans.append(None)
    return HunkPreview(hunk=hunk, pairs=filtered.pairs, spans=spans)


def preview_edit(
    proposal: Union[EditProposal, Mapping[str, Any]],
    buffers: Optional[Buffers] = None,
    config: Optional[PreviewConfig] = None,
) -> Preview:
    """
    Compute the hunks and word-level spans for an edit proposal.

    `proposal` is either a validated EditProposal or the raw payload from the
    agent. A malformed payload or an unreadable document never raises: the
    former gives an empty Preview, the latter is matched as an empty document.
    """
    config = config or PreviewConfig()

    if not isinstance(proposal, EditProposal):
        try:
            proposal = EditProposal.from_raw(proposal)
        except ProposalError as e:
            logger.warning(f"  - WARNING: {e}")
            raw_path = proposal.get("file_path", proposal.get("path")) if isinstance(proposal, Mapping) else None
            return Preview(path=raw_path if isinstance(raw_path, str) else "")

    document_lines = load_document_lines(proposal.path, buffers)
    hunks = extract_hunks(
        document_lines,
        proposal.path,
        proposal.old_text,
        proposal.new_text,
        replace_all=proposal.replace_all,
        strict=config.strict,
        loose=config.loose_match,
        logger=logger,
    )
    if not hunks:
        logger.debug(f"  - No changes detected for {proposal.path}")
    return Preview(path=proposal.path, items=[_hunk_preview(h) for h in hunks])
