# editlens/documents.py
"""
Document source: the current lines of a file, preferring unsaved buffer
content over what is on disk.
"""
import logging
import os
from typing import List, Mapping, Optional, Sequence

from .errors import DocumentReadError

log = logging.getLogger(__name__)

Buffers = Mapping[str, Sequence[str]]


def _buffer_lines(path: str, buffers: Optional[Buffers]) -> Optional[List[str]]:
    if not buffers:
        return None
    if path in buffers:
        return list(buffers[path])
    abs_path = os.path.abspath(path)
    if abs_path in buffers:
        return list(buffers[abs_path])
    return None


def read_document_lines(path: str, buffers: Optional[Buffers] = None) -> List[str]:
    """
    Lines of `path` as the user currently sees them.

    `buffers` maps paths (as given or absolute) to the lines of open editor
    buffers, which may hold unsaved edits. Otherwise the file is read from disk
    with CRLF folded to LF. Raises DocumentReadError for directories and for
    files that cannot be opened or decoded.
    """
    lines = _buffer_lines(path, buffers)
    if lines is not None:
        return lines

    abs_path = os.path.abspath(path)
    if os.path.isdir(abs_path):
        raise DocumentReadError(abs_path, "path is a directory")
    try:
        with open(abs_path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
    except FileNotFoundError as e:
        raise DocumentReadError(abs_path, "no such file", missing=True) from e
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(abs_path, str(e)) from e
    return content.replace("\r\n", "\n").split("\n")


def load_document_lines(path: str, buffers: Optional[Buffers] = None) -> List[str]:
    """read_document_lines, degrading to [] when the document cannot be read."""
    try:
        return read_document_lines(path, buffers)
    except DocumentReadError as e:
        if e.missing:
            # New files are proposed all the time.
            log.debug(f"  - {e}. Treating as a new, empty document.")
        else:
            log.warning(f"  - WARNING: {e}. Matching against an empty document.")
        return []
