"""
TESTSCOUT - File Analyzer Module

Full analysis of a single source file: language, test framework,
exported symbols and imports, bundled into a FileAnalysis record for
test generation.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.

Usage:
    from testscout.analyzer import analyze

    analysis = await analyze("src/utils/math.ts")
    print(analysis.to_text())
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import aiofiles

from .code_extractor import ExportedSymbol, SymbolKind, extract_exports, extract_imports
from .config import logger
from .framework_locator import TestFramework, locate
from .languages import SourceLanguage, classify


# =============================================================================
# Errors
# =============================================================================

class AnalysisError(Exception):
    """Base class for errors surfaced by analyze()."""
    pass


class UnsupportedFileType(AnalysisError):
    """The file extension is not a recognized source language."""

    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension}")


class SourceUnreadable(AnalysisError):
    """The source file could not be read as UTF-8 text."""

    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Cannot read {path}: {reason}")


# Used when the locator finds nothing
DEFAULT_FRAMEWORKS: Dict[SourceLanguage, TestFramework] = {
    SourceLanguage.JAVASCRIPT: TestFramework.JEST,
    SourceLanguage.TYPESCRIPT: TestFramework.JEST,
    SourceLanguage.PYTHON: TestFramework.PYTEST,
}


# =============================================================================
# Data Models
# =============================================================================

@dataclass(frozen=True)
class FileAnalysis:
    """Result of analyzing one source file."""
    file_path: str
    language: SourceLanguage
    framework: TestFramework
    source: str
    exports: List[ExportedSymbol] = field(default_factory=list)
    imports: List[str] = field(default_factory=list)

    @property
    def line_count(self) -> int:
        return len(self.source.split('\n'))

    @property
    def function_count(self) -> int:
        return sum(1 for e in self.exports if e.kind == SymbolKind.FUNCTION)

    @property
    def class_count(self) -> int:
        return sum(1 for e in self.exports if e.kind == SymbolKind.CLASS)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_path": self.file_path,
            "language": self.language.value,
            "framework": self.framework.value,
            "source": self.source,
            "exports": [e.to_dict() for e in self.exports],
            "imports": list(self.imports),
            "line_count": self.line_count,
            "function_count": self.function_count,
            "class_count": self.class_count,
        }

    def to_text(self) -> str:
        """Compact inventory of the file's exported surface."""
        lines = [
            f"{Path(self.file_path).name} ({self.language.value}, {self.framework.value})",
            f"{self.line_count} lines, {self.function_count} functions, {self.class_count} classes",
        ]

        for export in self.exports:
            if export.kind == SymbolKind.CLASS:
                lines.append(f"- {export.signature}")
                if export.methods:
                    lines.append("  Methods:")
                    lines.extend(f"    - {m.signature}" for m in export.methods)
            else:
                prefix = "async " if export.is_async else ""
                lines.append(f"- {prefix}function {export.signature}")

        if self.imports:
            lines.append(f"Imports: {', '.join(self.imports)}")

        return "\n".join(lines)


# =============================================================================
# Orchestrator
# =============================================================================

async def _read_source(file_path: Union[str, Path]) -> str:
    try:
        async with aiofiles.open(file_path, 'r', encoding='utf-8', newline='') as f:
            return await f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnreadable(str(file_path), str(e)) from e


async def analyze(
    file_path: Union[str, Path],
    framework: Optional[TestFramework] = None
) -> FileAnalysis:
    """
    Analyze a source file for test generation.

    Args:
        file_path: Path to a JS/TS or Python source file
        framework: Explicit framework that skips detection

    Returns:
        FileAnalysis with exports, imports and counters

    Raises:
        UnsupportedFileType: Extension is not recognized (nothing is read)
        SourceUnreadable: The file is missing or not valid UTF-8
    """
    language = classify(file_path)
    if language is None:
        raise UnsupportedFileType(Path(file_path).suffix)

    source = await _read_source(file_path)

    if framework is None:
        framework = await locate(file_path)
    if framework == TestFramework.UNKNOWN:
        framework = DEFAULT_FRAMEWORKS[language]

    analysis = FileAnalysis(
        file_path=str(file_path),
        language=language,
        framework=framework,
        source=source,
        exports=extract_exports(language, source),
        imports=extract_imports(language, source),
    )

    logger.info(
        f"Analyzed {file_path}: {analysis.function_count} functions, "
        f"{analysis.class_count} classes, {len(analysis.imports)} imports ({framework.value})"
    )
    return analysis
