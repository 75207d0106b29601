# editlens/utils/__init__.py
from .text import is_empty_lines, replace_first, text_to_lines

__all__ = [
    "is_empty_lines",
    "replace_first",
    "text_to_lines",
]
