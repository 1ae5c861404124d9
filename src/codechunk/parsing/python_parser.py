"""Python block extraction.

Declarations are located with a regular expression and their extent is
inferred from indentation. This is a lexical approximation: headers inside
string literals are matched too, and docstrings are only recognised on the
line directly after the header. A tokenizer or tree-sitter grammar is the
upgrade path if that stops being good enough.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from codechunk.models import ChunkType, CodeChunk
from codechunk.utils.text import (
    indent_width,
    is_blank,
    line_number_at,
    line_offsets,
    slice_lines,
    split_lines,
)

LOGGER = logging.getLogger(__name__)

DECLARATION_PATTERN = re.compile(
    r"^[ \t]*(async\s+def|def|class)\s+([^\W\d]\w*)", re.MULTILINE
)
DOCSTRING_QUOTES = ('"""', "'''")


def parse_python(content: str, file_path: Path) -> List[CodeChunk]:
    """Extract classes, functions and methods from Python source text."""
    lines = split_lines(content)
    offsets = line_offsets(content)
    parents = enclosing_lines(lines)
    chunks: List[CodeChunk] = []

    for match in DECLARATION_PATTERN.finditer(content):
        keyword = match.group(1)
        name = match.group(2) or "unknown"
        start_line = line_number_at(offsets, match.start())
        end_line = find_block_end(lines, start_line)

        if keyword == "class":
            chunk_type: ChunkType = "class"
        elif is_method(lines, parents, start_line - 1):
            chunk_type = "method"
        else:
            chunk_type = "function"

        chunks.append(
            CodeChunk(
                file_path=file_path,
                language="python",
                chunk_type=chunk_type,
                name=name,
                start_line=start_line,
                end_line=end_line,
                doc_string=extract_docstring(lines, start_line),
                code=slice_lines(lines, start_line, end_line),
            )
        )

    LOGGER.debug("Found %d Python chunks in %s", len(chunks), file_path)
    return chunks


def enclosing_lines(lines: Sequence[str]) -> List[Optional[int]]:
    """Index of the nearest preceding less-indented non-blank line, per line.

    Built in one pass with an indentation stack; blank lines map to None.
    """
    parents: List[Optional[int]] = [None] * len(lines)
    stack: List[Tuple[int, int]] = []
    for index, line in enumerate(lines):
        if is_blank(line):
            continue
        indent = indent_width(line)
        while stack and stack[-1][0] >= indent:
            stack.pop()
        parents[index] = stack[-1][1] if stack else None
        stack.append((indent, index))
    return parents


def is_method(
    lines: Sequence[str], parents: Sequence[Optional[int]], index: int
) -> bool:
    """A def is a method when its enclosing scope is a class header."""
    if indent_width(lines[index]) == 0:
        return False
    parent = parents[index]
    if parent is None:
        return False
    return lines[parent].strip().startswith("class ")


def find_block_end(lines: Sequence[str], start_line: int) -> int:
    """Last line (1-based) still indented deeper than the header."""
    header_indent = indent_width(lines[start_line - 1])
    end_line = start_line
    for index in range(start_line, len(lines)):
        line = lines[index]
        if is_blank(line):
            continue
        if indent_width(line) <= header_indent:
            break
        end_line = index + 1
    return end_line


def extract_docstring(lines: Sequence[str], start_line: int) -> Optional[str]:
    """Docstring opening on the line right after the header, if closed."""
    if start_line >= len(lines):
        return None
    first = lines[start_line].strip()
    quote = next((q for q in DOCSTRING_QUOTES if first.startswith(q)), None)
    if quote is None:
        return None

    closing_index: Optional[int] = None
    if quote in first[len(quote):]:
        closing_index = start_line
    else:
        for index in range(start_line + 1, len(lines)):
            if quote in lines[index]:
                closing_index = index
                break
    if closing_index is None:
        return None

    text = "\n".join(lines[start_line : closing_index + 1])
    return text.replace(quote, "").strip()
