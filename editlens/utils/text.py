from typing import List, Optional, Sequence, Union


def text_to_lines(text: Optional[Union[str, Sequence[str]]]) -> List[str]:
    """
    Split proposal text into lines.

    None and "" both mean "no text" and give []. Strings are split on "\\n"
    after folding CRLF, so a trailing newline yields a final "" line. A
    sequence of lines is taken as already split.
    """
    if text is None or text == "":
        return []
    if isinstance(text, str):
        return text.replace("\r\n", "\n").split("\n")
    return list(text)


def is_empty_lines(lines: Sequence[str]) -> bool:
    """A document or pattern with no lines, or only one blank line, is empty."""
    return len(lines) == 0 or (len(lines) == 1 and lines[0] == "")


def replace_first(line: str, search: str, replacement: str) -> str:
    """Replace the first literal occurrence of `search` in `line`."""
    return line.replace(search, replacement, 1)
