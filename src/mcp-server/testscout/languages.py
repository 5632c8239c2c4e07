"""
TESTSCOUT - Language Classifier Module

Maps a file path to its source language by extension.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Union


class SourceLanguage(str, Enum):
    """Languages the analyzer can extract exports from."""
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    PYTHON = "python"

    @property
    def is_javascript_family(self) -> bool:
        return self in (SourceLanguage.JAVASCRIPT, SourceLanguage.TYPESCRIPT)


LANGUAGE_EXTENSIONS: Dict[str, SourceLanguage] = {
    ".js": SourceLanguage.JAVASCRIPT,
    ".jsx": SourceLanguage.JAVASCRIPT,
    ".mjs": SourceLanguage.JAVASCRIPT,
    ".cjs": SourceLanguage.JAVASCRIPT,
    ".ts": SourceLanguage.TYPESCRIPT,
    ".tsx": SourceLanguage.TYPESCRIPT,
    ".mts": SourceLanguage.TYPESCRIPT,
    ".py": SourceLanguage.PYTHON,
}


def classify(file_path: Union[str, Path]) -> Optional[SourceLanguage]:
    """Detect language from file extension. Returns None if unrecognized."""
    return LANGUAGE_EXTENSIONS.get(Path(file_path).suffix.lower())
