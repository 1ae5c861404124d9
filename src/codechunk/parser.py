"""Directory parsing pipeline."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

from codechunk.config import AppConfig
from codechunk.models import CodeChunk, Language
from codechunk.parsing.javascript_parser import parse_javascript
from codechunk.parsing.python_parser import parse_python
from codechunk.utils.files import iter_source_files, read_source

LOGGER = logging.getLogger(__name__)


class ParseError(RuntimeError):
    """Raised when a source file cannot be read, decoded or parsed."""

    def __init__(self, path: Path, cause: BaseException) -> None:
        super().__init__(f"Failed to read or parse file {path}: {cause}")
        self.path = path
        self.cause = cause


def list_files(directory: Path) -> list[Path]:
    """Collect every file under the directory."""
    return list(iter_source_files(directory))


class CodeParser:
    """Walks a directory and turns supported source files into code chunks."""

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self.config = config or AppConfig()

    async def parse_directory(self, directory: Path | str) -> List[CodeChunk]:
        """Parse every supported file under directory, one file at a time.

        The call is all-or-nothing: an unreadable directory or file aborts it.
        """
        root = Path(directory)
        files = await asyncio.to_thread(list_files, root)
        LOGGER.debug("Found %d files under %s", len(files), root)

        chunks: List[CodeChunk] = []
        for path in files:
            language = self.config.language_for(path)
            if language is None:
                LOGGER.debug("Skipping unsupported file %s", path)
                continue
            try:
                content = await asyncio.to_thread(read_source, path, self.config.encoding)
                file_chunks = self.parse_source(content, path, language)
            except Exception as exc:
                LOGGER.error("Failed to read or parse %s: %s", path, exc)
                raise ParseError(path, exc) from exc
            chunks.extend(file_chunks)

        LOGGER.info("Extracted %d chunks from %s", len(chunks), root)
        return chunks

    def parse_file(self, path: Path | str) -> List[CodeChunk]:
        """Parse a single file; unsupported extensions yield no chunks."""
        path = Path(path)
        language = self.config.language_for(path)
        if language is None:
            return []
        try:
            content = read_source(path, self.config.encoding)
            return self.parse_source(content, path, language)
        except Exception as exc:
            raise ParseError(path, exc) from exc

    @staticmethod
    def parse_source(content: str, file_path: Path, language: Language) -> List[CodeChunk]:
        if language == "python":
            return parse_python(content, file_path)
        return parse_javascript(content, file_path, language)


async def parse_directory(
    directory: Path | str, config: Optional[AppConfig] = None
) -> List[CodeChunk]:
    """Convenience wrapper around CodeParser.parse_directory."""
    return await CodeParser(config).parse_directory(directory)
