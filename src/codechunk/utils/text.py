"""Line and indentation helpers shared by the extractors."""

from __future__ import annotations

from bisect import bisect_right
from typing import List, Sequence


def split_lines(content: str) -> List[str]:
    """Split on newlines only so that joining the parts restores the text."""
    return content.split("\n")


def line_offsets(content: str) -> List[int]:
    """Return the character offset at which each line starts."""
    offsets = [0]
    index = content.find("\n")
    while index != -1:
        offsets.append(index + 1)
        index = content.find("\n", index + 1)
    return offsets


def line_number_at(offsets: Sequence[int], position: int) -> int:
    """1-based line number of the character at position."""
    return bisect_right(offsets, position)


def indent_width(line: str) -> int:
    """Raw leading whitespace length; tabs count as one character."""
    return len(line) - len(line.lstrip())


def is_blank(line: str) -> bool:
    return not line.strip()


def slice_lines(lines: Sequence[str], start_line: int, end_line: int) -> str:
    """Join lines start_line..end_line (1-based, inclusive)."""
    return "\n".join(lines[start_line - 1 : end_line])
