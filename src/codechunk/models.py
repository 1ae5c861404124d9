"""Core codechunk data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Literal, Optional

Language = Literal["python", "javascript", "typescript", "jsx", "tsx"]
ChunkType = Literal["function", "class", "method", "arrow_function", "other"]


@dataclass(slots=True)
class CodeChunk:
    """One extracted unit of source code with its location and documentation."""

    file_path: Path
    language: Language
    chunk_type: ChunkType
    name: str
    start_line: int
    end_line: int
    doc_string: Optional[str]
    code: str

    @property
    def line_count(self) -> int:
        return self.end_line - self.start_line + 1

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the camelCase keys consumers of the chunk list expect."""
        return {
            "filePath": str(self.file_path),
            "language": self.language,
            "chunkType": self.chunk_type,
            "name": self.name,
            "startLine": self.start_line,
            "endLine": self.end_line,
            "docString": self.doc_string,
            "code": self.code,
        }
