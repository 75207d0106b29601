from .words import aligned_old_lines, find_change, segment_line

__all__ = ["aligned_old_lines", "find_change", "segment_line"]
