# editlens/hunks/builder.py
"""
Turn an edit proposal into minimal line-level hunks against the current document.

Two phases:
  1. build_diff_blocks: locate the old text (or decide it is new content) and
     produce raw DiffBlocks, one per used match.
  2. minimize_diff_blocks: strip unchanged context from each block with a
     zero-context line diff, splitting it into one Hunk per changed region.
"""
from __future__ import annotations

import re
from typing import List, Optional, Sequence, Union

from .._logging import resolve_logger
from ..locate.matcher import find_all_matches
from ..models.blocks import DiffBlock, Hunk, Match
from ..utils.text import is_empty_lines, text_to_lines
from .align import line_opcodes

__all__ = ["extract_hunks", "build_diff_blocks", "minimize_diff_blocks"]

Text = Optional[Union[str, Sequence[str]]]

_LEADING_WS_RE = re.compile(r"^[\t ]*")


def _leading_ws(s: str) -> str:
    m = _LEADING_WS_RE.match(s)
    return m.group(0) if m else ""


def _reindent_relative(new_lines: List[str], search_first: str, matched_first: str) -> List[str]:
    """
    Shift replacement lines so the indentation of `search_first` becomes the
    indentation actually found at `matched_first`.
    """
    if not new_lines:
        return new_lines
    ref_in = _leading_ws(search_first)
    ref_out = _leading_ws(matched_first)
    if ref_in == ref_out:
        return new_lines
    if not ref_in:
        return [ref_out + ln if ln else ln for ln in new_lines]
    adjusted: List[str] = []
    for ln in new_lines:
        ws = _leading_ws(ln)
        adjusted.append(ws.replace(ref_in, ref_out, 1) + ln[len(ws):])
    return adjusted


def _new_content_block(new_lines: List[str]) -> DiffBlock:
    """A pure insertion of the whole new text at the top of an empty document."""
    return DiffBlock(start_line=1, end_line=0, old_lines=[], new_lines=new_lines)


def _block_for_match(
    document_lines: Sequence[str], match: Match, old_lines: List[str], new_lines: List[str]
) -> DiffBlock:
    # The old side always comes from the document: identical for exact matches,
    # the real (unstripped) lines for loose ones.
    old = list(document_lines[match.start_line - 1 : match.end_line])
    if match.strategy == "substring":
        new = [match.replacement if match.replacement is not None else old[0]]
    elif match.strategy == "loose":
        new = _reindent_relative(list(new_lines), old_lines[0], old[0])
    else:
        new = list(new_lines)
    return DiffBlock(start_line=match.start_line, end_line=match.end_line, old_lines=old, new_lines=new)


def build_diff_blocks(
    document_lines: Sequence[str],
    old_lines: List[str],
    new_lines: List[str],
    *,
    replace_all: bool = False,
    strict: bool = False,
    loose: bool = False,
    logger=None,
    log: bool = False,
) -> List[DiffBlock]:
    """Raw, unminimized DiffBlocks for one proposal."""
    log = resolve_logger(logger=logger, enabled=log, name=__name__)

    if is_empty_lines(old_lines):
        if is_empty_lines(document_lines):
            return [_new_content_block(new_lines)]
        # No old text but the file has content: the proposal rewrites all of it.
        doc = list(document_lines)
        return [DiffBlock(start_line=1, end_line=len(doc), old_lines=doc, new_lines=list(new_lines))]

    matches = find_all_matches(document_lines, old_lines, new_lines, loose=loose, logger=log)
    if matches:
        used = matches if replace_all else matches[:1]
        return [_block_for_match(document_lines, m, old_lines, new_lines) for m in used]

    if strict:
        log.debug("old text not located; strict mode, no fallback block")
        return []

    log.debug("old text not located; showing the proposal verbatim at line 1")
    return [
        DiffBlock(
            start_line=1,
            end_line=max(1, len(old_lines)),
            old_lines=list(old_lines),
            new_lines=list(new_lines),
        )
    ]


def _hunk_from_opcode(block: DiffBlock, i1: int, i2: int, j1: int, j2: int) -> Hunk:
    if i2 > i1:
        start_line = block.start_line + i1
        end_line = start_line + (i2 - i1) - 1
    else:
        # Pure insertion before old line i1 (0-based), i.e. before start_line + i1.
        start_line = block.start_line + i1
        end_line = start_line - 1
    return Hunk(
        start_line=start_line,
        end_line=end_line,
        old_lines=list(block.old_lines[i1:i2]),
        new_lines=list(block.new_lines[j1:j2]),
    )


def minimize_diff_blocks(diff_blocks: Sequence[DiffBlock]) -> List[Hunk]:
    """Strip unchanged lines from each block; sorted by start_line."""
    minimized: List[Hunk] = []

    for block in diff_blocks:
        if "\n".join(block.old_lines) == "\n".join(block.new_lines):
            continue

        if len(block.old_lines) == 1 and len(block.new_lines) == 1:
            minimized.append(Hunk.from_block(block))
            continue

        opcodes = line_opcodes(block.old_lines, block.new_lines)
        if opcodes:
            for _tag, i1, i2, j1, j2 in opcodes:
                minimized.append(_hunk_from_opcode(block, i1, i2, j1, j2))
        else:
            minimized.append(Hunk.from_block(block))

    minimized.sort(key=lambda h: h.start_line)
    return minimized


def extract_hunks(
    document_lines: Sequence[str],
    path: str,
    old_text: Text,
    new_text: Text,
    replace_all: bool = False,
    strict: bool = False,
    *,
    loose: bool = False,
    logger=None,
    log: bool = False,
) -> List[Hunk]:
    """
    Minimal hunks for replacing `old_text` with `new_text` in the document.

    `old_text` of None or "" means new content: a pure insertion into an empty
    document, or a whole-document replacement otherwise. When the old text
    cannot be located, a best-effort block at line 1 is shown unless `strict`.
    A missing path or new text yields no hunks.
    """
    log = resolve_logger(logger=logger, enabled=log, name=__name__)
    if not path or new_text is None:
        log.debug("ignoring proposal without path or new text")
        return []

    blocks = build_diff_blocks(
        document_lines,
        text_to_lines(old_text),
        text_to_lines(new_text),
        replace_all=replace_all,
        strict=strict,
        loose=loose,
        logger=log,
    )
    blocks.sort(key=lambda b: b.start_line)
    hunks = minimize_diff_blocks(blocks)
    log.debug("%s: %d block(s) -> %d hunk(s)", path, len(blocks), len(hunks))
    return hunks
