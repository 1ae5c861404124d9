"""JavaScript/TypeScript block extraction.

Covers function, generator and class declarations plus arrow functions
assigned with const/let/var. Members declared inside a class body without the
function keyword are not emitted, and functions nested inside other blocks
are emitted as chunks of their own.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import List, Optional

from codechunk.models import ChunkType, CodeChunk, Language
from codechunk.parsing.scanner import find_block_end
from codechunk.utils.text import line_number_at, line_offsets, slice_lines, split_lines

LOGGER = logging.getLogger(__name__)

DECLARATION_PATTERN = re.compile(
    r"\b(?:export\s+)?(async\s+)?(function\*?|class)\s+([A-Za-z0-9_$]+)"
    r"|\b(?:export\s+)?(const|let|var)\s+([A-Za-z0-9_$]+)\s*=\s*(?:async)?\s*\(.*?\)\s*=>"
)
JSDOC_LEADER = re.compile(r"^\* ?")


def parse_javascript(content: str, file_path: Path, language: Language) -> List[CodeChunk]:
    """Extract functions, arrow functions and classes from JS/TS source text."""
    lines = split_lines(content)
    offsets = line_offsets(content)
    chunks: List[CodeChunk] = []

    for match in DECLARATION_PATTERN.finditer(content):
        start = match.start()
        start_line = line_number_at(offsets, start)

        closing = find_block_end(content, start)
        if closing is None:
            LOGGER.debug(
                "No closing brace for declaration at %s:%d, extending to end of file",
                file_path,
                start_line,
            )
            end_line = len(lines)
        else:
            end_line = line_number_at(offsets, closing)

        keyword = match.group(2)
        if keyword == "class":
            chunk_type: ChunkType = "class"
        elif keyword is not None:
            chunk_type = "function"
        elif "=>" in match.group(0):
            chunk_type = "arrow_function"
        else:
            chunk_type = "other"

        chunks.append(
            CodeChunk(
                file_path=file_path,
                language=language,
                chunk_type=chunk_type,
                name=match.group(3) or match.group(5) or "unknown",
                start_line=start_line,
                end_line=end_line,
                doc_string=extract_jsdoc(content, start),
                code=slice_lines(lines, start_line, end_line),
            )
        )

    LOGGER.debug("Found %d %s chunks in %s", len(chunks), language, file_path)
    return chunks


def extract_jsdoc(content: str, start: int) -> Optional[str]:
    """Text of a /** ... */ block ending right before start, de-starred."""
    preceding = content[:start].rstrip()
    if not preceding.endswith("*/"):
        return None
    opening = preceding.rfind("/**")
    if opening == -1 or opening + 3 > len(preceding) - 2:
        return None
    body = preceding[opening + 3 : -2]
    if "*/" in body:
        return None

    cleaned = (JSDOC_LEADER.sub("", line.strip()) for line in body.split("\n"))
    return "\n".join(cleaned).strip()
