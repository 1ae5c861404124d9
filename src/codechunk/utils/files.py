"""Utility helpers for walking source trees."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, Mapping, Optional

from codechunk.models import Language

SUPPORTED_EXTENSIONS: dict[str, Language] = {
    ".py": "python",
    ".js": "javascript",
    ".ts": "typescript",
    ".jsx": "jsx",
    ".tsx": "tsx",
}


def iter_source_files(root: Path) -> Iterator[Path]:
    """Yield every file under root, descending into directories depth-first.

    Errors raised while listing a directory propagate to the caller.
    """
    with os.scandir(root) as listing:
        entries = sorted(listing, key=lambda entry: entry.name)
    for entry in entries:
        path = Path(root) / entry.name
        if entry.is_dir():
            yield from iter_source_files(path)
        else:
            yield path


def classify_language(
    path: Path, extensions: Optional[Mapping[str, Language]] = None
) -> Optional[Language]:
    """Map a file's suffix to its language tag, or None when unsupported."""
    table = SUPPORTED_EXTENSIONS if extensions is None else extensions
    return table.get(Path(path).suffix)


def read_source(path: Path, encoding: str = "utf-8") -> str:
    """Read a file without newline translation so line slices stay verbatim."""
    return Path(path).read_bytes().decode(encoding)
