# editlens/locate/matcher.py
from __future__ import annotations

from typing import List, Optional, Sequence

from .._logging import resolve_logger
from ..models.blocks import Match
from ..utils.text import replace_first

__all__ = ["find_all_matches"]


def _eq_loose(a: str, b: str) -> bool:
    """Equality ignoring leading/trailing whitespace."""
    return a == b or a.strip() == b.strip()


def _scan_runs(target: Sequence[str], block: Sequence[str], loose: bool = False) -> List[int]:
    """
    0-based start indices of non-overlapping runs of `block` inside `target`.
    After a hit at i, scanning resumes at i + len(block).
    """
    starts: List[int] = []
    m = len(block)
    if m == 0:
        return starts
    n = len(target)
    i = 0
    while i <= n - m:
        ok = True
        for j in range(m):
            if loose:
                if not _eq_loose(target[i + j], block[j]):
                    ok = False
                    break
            elif target[i + j] != block[j]:
                ok = False
                break
        if ok:
            starts.append(i)
            i += m
        else:
            i += 1
    return starts


def _substring_matches(document_lines: Sequence[str], search: str, replace: str) -> List[Match]:
    """One single-line Match per document line containing `search` literally."""
    matches: List[Match] = []
    if not search:
        return matches
    for idx, line in enumerate(document_lines, start=1):
        if search in line:
            matches.append(
                Match(
                    start_line=idx,
                    end_line=idx,
                    strategy="substring",
                    replacement=replace_first(line, search, replace),
                )
            )
    return matches


def find_all_matches(
    document_lines: Sequence[str],
    pattern_lines: Sequence[str],
    replacement_lines: Optional[Sequence[str]] = None,
    *,
    loose: bool = False,
    logger=None,
    log: bool = False,
) -> List[Match]:
    """
    Locate every non-overlapping occurrence of `pattern_lines` in the document.

    Tiers, each tried only when the previous one found nothing:
      1. exact, contiguous line-for-line runs (always first);
      2. when both pattern and replacement are single lines, a literal
         substring search, one Match per containing line (first occurrence);
      3. with `loose=True`, runs compared with surrounding whitespace stripped.

    An empty list is an ordinary result: the document may have drifted from
    what the agent saw.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)

    starts = _scan_runs(document_lines, pattern_lines)
    m = len(pattern_lines)
    if starts:
        log.debug("exact: %d match(es) for %d-line pattern", len(starts), m)
        return [Match(start_line=s + 1, end_line=s + m) for s in starts]

    if replacement_lines is not None and m == 1 and len(replacement_lines) == 1:
        matches = _substring_matches(document_lines, pattern_lines[0], replacement_lines[0])
        if matches:
            log.debug("substring: %d line(s) contain the pattern", len(matches))
            return matches

    if loose:
        starts = _scan_runs(document_lines, pattern_lines, loose=True)
        if starts:
            log.debug("loose: %d match(es) ignoring surrounding whitespace", len(starts))
            return [Match(start_line=s + 1, end_line=s + m, strategy="loose") for s in starts]

    log.debug("pattern of %d line(s) not located in %d-line document", m, len(document_lines))
    return []
