"""Brace matching for C-like sources.

The scanner is a three-state machine. Braces only count in CODE; quotes open
IN_STRING and the same quote closes it; a backslash inside a string moves to
ESCAPED, which consumes exactly one character and returns to IN_STRING.
Comments and regex literals are not recognised.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional

QUOTES = frozenset("'\"`")


class ScanState(Enum):
    CODE = "code"
    IN_STRING = "in_string"
    ESCAPED = "escaped"


def find_block_end(content: str, start: int) -> Optional[int]:
    """Offset of the brace closing the first block opened at or after start.

    Returns None when the block is never closed before the end of content.
    """
    state = ScanState.CODE
    quote: Optional[str] = None
    depth = 0
    opened = False

    for position in range(start, len(content)):
        char = content[position]

        if state is ScanState.ESCAPED:
            state = ScanState.IN_STRING
            continue

        if state is ScanState.IN_STRING:
            if char == "\\":
                state = ScanState.ESCAPED
            elif char == quote:
                state = ScanState.CODE
                quote = None
            continue

        if char in QUOTES:
            state = ScanState.IN_STRING
            quote = char
        elif char == "{":
            depth += 1
            opened = True
        elif char == "}" and opened:
            depth -= 1
            if depth == 0:
                return position

    return None
