"""
TESTSCOUT - Code Extractor Module

Extracts the exported surface of a source file (functions, arrow-function
exports, classes and their methods) and its import references using
lexical patterns. This is not a parser: strings, comments and regex
literals are not understood.

Copyright (c) 2026 Provimedia GmbH
Licensed under the Polyform Noncommercial License 1.0.0
See LICENSE file in the project root for full license information.

Usage:
    from testscout.code_extractor import extract_exports, extract_imports

    exports = extract_exports(SourceLanguage.TYPESCRIPT, content)
    imports = extract_imports(SourceLanguage.TYPESCRIPT, content)
"""

import re
from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional

from .config import (
    NAMED_EXPORT_ASYNC_WINDOW,
    ARROW_EXPORT_ASYNC_WINDOW,
    DEFAULT_EXPORT_ASYNC_WINDOW,
    DEFAULT_SYMBOL_NAME,
)
from .languages import SourceLanguage


# =============================================================================
# Data Models
# =============================================================================

class SymbolKind(str, Enum):
    """Kinds of exported symbols."""
    FUNCTION = "function"
    CLASS = "class"


@dataclass
class ClassMethod:
    """A method declared inside a class body."""
    name: str
    signature: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ExportedSymbol:
    """An exported function or class."""
    kind: SymbolKind
    name: str
    signature: str
    is_async: bool = False             # Functions only
    is_default: bool = False           # Functions only
    base_name: Optional[str] = None    # Classes only
    methods: List[ClassMethod] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "name": self.name,
            "signature": self.signature,
            "is_async": self.is_async,
            "is_default": self.is_default,
            "base_name": self.base_name,
            "methods": [m.to_dict() for m in self.methods],
        }


# =============================================================================
# Patterns
# =============================================================================

JS_NAMED_FUNCTION = re.compile(
    r'export\s+(?:async\s+)?function\s+(?P<name>\w+)\s*\((?P<params>[^)]*)\)'
)
JS_ARROW_FUNCTION = re.compile(
    r'export\s+const\s+(?P<name>\w+)\s*=\s*(?:async\s*)?\((?P<params>[^)]*)\)\s*=>'
)
JS_CLASS = re.compile(
    r'export\s+(?:default\s+)?class\s+(?P<name>\w+)'
    r'(?:\s+extends\s+(?P<extends>\w+))?'
)
JS_DEFAULT_FUNCTION = re.compile(
    r'export\s+default\s+(?:async\s+)?function\s*(?P<name>\w*)\s*\((?P<params>[^)]*)\)'
)
JS_METHOD = re.compile(
    r'(?:(?:async|static|get|set|public|private|protected)\s+)*'
    r'(?P<name>\w+)\s*\((?P<params>[^)]*)\)\s*(?::\s*\w+)?\s*\{'
)
JS_IMPORT = re.compile(
    r'import\s+(?:(?:\{[^}]*\}|\*\s+as\s+\w+|\w+)'
    r'(?:\s*,\s*(?:\{[^}]*\}|\w+))*\s+from\s+)?'
    r'[\'"](?P<module>[^\'"]+)[\'"]'
)

PYTHON_FUNCTION = re.compile(
    r'^(?P<async>async\s+)?def\s+(?P<name>\w+)\s*\((?P<params>[^)]*)\)',
    re.MULTILINE
)
PYTHON_CLASS = re.compile(
    r'^class\s+(?P<name>\w+)(?:\((?P<bases>[^)]*)\))?:',
    re.MULTILINE
)
PYTHON_IMPORT = re.compile(
    r'^(?:from\s+(?P<from_module>[\w.]+)\s+import|import\s+(?P<module>[\w.]+))',
    re.MULTILINE
)

# Control statements share the method shape: name (...) {
CONTROL_KEYWORDS = {'if', 'for', 'while', 'switch', 'catch'}


# =============================================================================
# Brace-Scoped Method Scanner
# =============================================================================

def _class_body(source: str, class_offset: int) -> Optional[str]:
    """Text between the first '{' after class_offset and its matching '}'."""
    brace_start = source.find('{', class_offset)
    if brace_start == -1:
        return None

    depth = 0
    body_end = len(source)  # Unbalanced: rest of file
    for i in range(brace_start, len(source)):
        char = source[i]
        if char == '{':
            depth += 1
        elif char == '}':
            depth -= 1
            if depth == 0:
                body_end = i
                break

    return source[brace_start + 1:body_end]


def extract_methods(source: str, class_offset: int) -> List[ClassMethod]:
    """
    Extract method signatures from the class declared at class_offset.

    Args:
        source: Full source text
        class_offset: Index where the class declaration match starts

    Returns:
        Methods in declaration order; empty if the class has no body
    """
    body = _class_body(source, class_offset)
    if body is None:
        return []

    methods = []
    for match in JS_METHOD.finditer(body):
        name = match.group('name')
        if name in CONTROL_KEYWORDS:
            continue
        methods.append(ClassMethod(
            name=name,
            signature=f"{name}({match.group('params').strip()})"
        ))
    return methods


# =============================================================================
# JavaScript / TypeScript
# =============================================================================

def _is_async(source: str, start: int, window: int) -> bool:
    return 'async' in source[start:start + window]


def extract_js_exports(source: str) -> List[ExportedSymbol]:
    """
    Extract exported functions and classes from JS/TS source.

    Four independent passes run in order (named functions, arrow
    functions, classes, default functions). Results are concatenated
    without deduplication.
    """
    exports: List[ExportedSymbol] = []

    for match in JS_NAMED_FUNCTION.finditer(source):
        name = match.group('name')
        exports.append(ExportedSymbol(
            kind=SymbolKind.FUNCTION,
            name=name,
            signature=f"{name}({match.group('params').strip()})",
            is_async=_is_async(source, match.start(), NAMED_EXPORT_ASYNC_WINDOW),
        ))

    for match in JS_ARROW_FUNCTION.finditer(source):
        name = match.group('name')
        exports.append(ExportedSymbol(
            kind=SymbolKind.FUNCTION,
            name=name,
            signature=f"{name}({match.group('params').strip()})",
            is_async=_is_async(source, match.start(), ARROW_EXPORT_ASYNC_WINDOW),
        ))

    for match in JS_CLASS.finditer(source):
        name = match.group('name')
        extends = match.group('extends')
        exports.append(ExportedSymbol(
            kind=SymbolKind.CLASS,
            name=name,
            signature=f"class {name} extends {extends}" if extends else f"class {name}",
            base_name=extends,
            methods=extract_methods(source, match.start()),
        ))

    for match in JS_DEFAULT_FUNCTION.finditer(source):
        name = match.group('name') or DEFAULT_SYMBOL_NAME
        exports.append(ExportedSymbol(
            kind=SymbolKind.FUNCTION,
            name=name,
            signature=f"{name}({match.group('params').strip()})",
            is_async=_is_async(source, match.start(), DEFAULT_EXPORT_ASYNC_WINDOW),
            is_default=True,
        ))

    return exports


def extract_js_imports(source: str) -> List[str]:
    """Module specifiers from import statements, in source order."""
    return [match.group('module') for match in JS_IMPORT.finditer(source)]


# =============================================================================
# Python
# =============================================================================

def extract_python_exports(source: str) -> List[ExportedSymbol]:
    """
    Extract top-level functions and classes from Python source.

    Functions starting with an underscore are private and skipped.
    Class methods are not extracted.
    """
    exports: List[ExportedSymbol] = []

    for match in PYTHON_FUNCTION.finditer(source):
        name = match.group('name')
        if name.startswith('_'):
            continue
        exports.append(ExportedSymbol(
            kind=SymbolKind.FUNCTION,
            name=name,
            signature=f"{name}({match.group('params').strip()})",
            is_async=bool(match.group('async')),
        ))

    for match in PYTHON_CLASS.finditer(source):
        name = match.group('name')
        bases = match.group('bases')
        exports.append(ExportedSymbol(
            kind=SymbolKind.CLASS,
            name=name,
            signature=f"class {name}({bases})" if bases else f"class {name}",
            base_name=bases or None,
        ))

    return exports


def extract_python_imports(source: str) -> List[str]:
    """Module names from line-start import/from-import statements."""
    return [
        match.group('from_module') or match.group('module')
        for match in PYTHON_IMPORT.finditer(source)
    ]


# =============================================================================
# Dispatch
# =============================================================================

def extract_exports(language: SourceLanguage, source: str) -> List[ExportedSymbol]:
    if language == SourceLanguage.PYTHON:
        return extract_python_exports(source)
    return extract_js_exports(source)


def extract_imports(language: SourceLanguage, source: str) -> List[str]:
    if language == SourceLanguage.PYTHON:
        return extract_python_imports(source)
    return extract_js_imports(source)
