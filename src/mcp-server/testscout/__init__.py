"""
TESTSCOUT - Static source analyzer for test generation.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.
"""

from .config import VERSION
from .languages import SourceLanguage, classify
from .framework_locator import TestFramework, locate
from .code_extractor import (
    ClassMethod,
    ExportedSymbol,
    SymbolKind,
    extract_exports,
    extract_imports,
    extract_methods,
)
from .analyzer import (
    AnalysisError,
    FileAnalysis,
    SourceUnreadable,
    UnsupportedFileType,
    analyze,
)

__version__ = VERSION

__all__ = [
    "SourceLanguage", "classify",
    "TestFramework", "locate",
    "ClassMethod", "ExportedSymbol", "SymbolKind",
    "extract_exports", "extract_imports", "extract_methods",
    "AnalysisError", "FileAnalysis", "SourceUnreadable", "UnsupportedFileType",
    "analyze",
]
