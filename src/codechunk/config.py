"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from codechunk.models import Language
from codechunk.utils.files import SUPPORTED_EXTENSIONS, classify_language


@dataclass(slots=True)
class AppConfig:
    extensions: Dict[str, Language] = field(default_factory=lambda: dict(SUPPORTED_EXTENSIONS))
    encoding: str = "utf-8"

    def language_for(self, path: Path) -> Optional[Language]:
        return classify_language(path, self.extensions)
