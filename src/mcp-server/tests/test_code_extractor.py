"""
Tests for the Code Extractor module.

Tests the lexical export, method and import extraction for
JavaScript/TypeScript and Python sources.
"""

import pytest
from testscout.code_extractor import (
    ClassMethod, ExportedSymbol, SymbolKind,
    extract_methods,
    extract_js_exports, extract_js_imports,
    extract_python_exports, extract_python_imports,
    extract_exports, extract_imports,
)
from testscout.languages import SourceLanguage


CALCULATOR_JS = """\
import Base from './base'

export class Calculator extends Base {
  constructor(initial) {
    super()
    this.value = initial
  }

  add(a, b) {
    if (a > b) {
      return a
    }
    return a + b
  }

  static async create(options) {
    for (const key of Object.keys(options)) {
      console.log(key)
    }
    return new Calculator(0)
  }
}
"""


class TestMethodScanner:
    """Tests for brace-scoped method extraction."""

    def test_control_keywords_rejected(self):
        """Test that if/for inside method bodies are not methods."""
        methods = extract_methods(CALCULATOR_JS, CALCULATOR_JS.index("export class"))
        assert [m.name for m in methods] == ["constructor", "add", "create"]

    def test_method_signature(self):
        methods = extract_methods(CALCULATOR_JS, CALCULATOR_JS.index("export class"))
        assert methods[1] == ClassMethod(name="add", signature="add(a, b)")
        assert methods[2].signature == "create(options)"

    def test_no_opening_brace(self):
        """Test a declaration without a body yields no methods."""
        assert extract_methods("export class Empty", 0) == []

    def test_body_ends_at_matching_brace(self):
        source = (
            "class A {\n  inner() { return 1 }\n}\n"
            "function outside() {\n  return 2\n}\n"
        )
        assert [m.name for m in extract_methods(source, 0)] == ["inner"]

    def test_unbalanced_body_runs_to_end(self):
        """Test a missing closing brace degrades to rest of file."""
        source = "class Broken {\n  first() {\n  }\n  second(x) {\n"
        assert [m.name for m in extract_methods(source, 0)] == ["first", "second"]

    def test_modifiers_and_return_types(self):
        source = """class Service {
  public async load(id: string): Promise {
  }
  private get total(): number {
  }
  protected reset() {
  }
}"""
        methods = extract_methods(source, 0)
        assert [m.name for m in methods] == ["load", "total", "reset"]
        assert methods[0].signature == "load(id: string)"

    def test_switch_while_catch_rejected(self):
        source = """class Loop {
  run(items) {
    while (items.length) {
      switch (items.pop()) {
      }
    }
    try {
    } catch (e) {
    }
  }
}"""
        assert [m.name for m in extract_methods(source, 0)] == ["run"]


class TestJSExports:
    """Tests for JavaScript/TypeScript export extraction."""

    def test_named_function(self):
        exports = extract_js_exports("export function add(a, b) {}")
        assert len(exports) == 1
        symbol = exports[0]
        assert symbol.kind == SymbolKind.FUNCTION
        assert symbol.name == "add"
        assert symbol.signature == "add(a, b)"
        assert symbol.is_async is False
        assert symbol.is_default is False

    def test_async_named_function(self):
        exports = extract_js_exports("export async function fetchUser(id) {}")
        assert exports[0].name == "fetchUser"
        assert exports[0].is_async is True

    def test_params_are_stripped(self):
        exports = extract_js_exports("export function pad(  value, width  ) {}")
        assert exports[0].signature == "pad(value, width)"

    def test_typed_params_kept_raw(self):
        exports = extract_js_exports("export function sum(a: number, b: number): number {}")
        assert exports[0].signature == "sum(a: number, b: number)"

    def test_arrow_function(self):
        exports = extract_js_exports("export const double = (n) => n * 2")
        assert exports[0].name == "double"
        assert exports[0].signature == "double(n)"
        assert exports[0].is_async is False

    def test_async_arrow_function(self):
        exports = extract_js_exports("export const loadConfig = async (path) => {}")
        assert exports[0].is_async is True

    def test_class_with_base_and_methods(self):
        exports = extract_js_exports(CALCULATOR_JS)
        assert len(exports) == 1
        cls = exports[0]
        assert cls.kind == SymbolKind.CLASS
        assert cls.name == "Calculator"
        assert cls.base_name == "Base"
        assert cls.signature == "class Calculator extends Base"
        assert len(cls.methods) == 3

    def test_class_without_base(self):
        exports = extract_js_exports("export class Store {\n  get(key) {\n  }\n}")
        assert exports[0].signature == "class Store"
        assert exports[0].base_name is None

    def test_default_class(self):
        exports = extract_js_exports("export default class App {}")
        assert exports[0].kind == SymbolKind.CLASS
        assert exports[0].name == "App"

    def test_default_named_function(self):
        exports = extract_js_exports("export default function handler(req, res) {}")
        assert len(exports) == 1
        assert exports[0].name == "handler"
        assert exports[0].is_default is True

    def test_default_anonymous_function(self):
        exports = extract_js_exports("export default async function (event) {}")
        assert exports[0].name == "default"
        assert exports[0].signature == "default(event)"
        assert exports[0].is_async is True
        assert exports[0].is_default is True

    def test_pass_order(self):
        """Test results follow pass order, not source order."""
        source = (
            "export default function main() {}\n"
            "export class Model {}\n"
            "export const helper = () => 1\n"
            "export function util() {}\n"
        )
        names = [e.name for e in extract_js_exports(source)]
        assert names == ["util", "helper", "Model", "main"]

    def test_duplicates_preserved(self):
        source = "export function dup() {}\nexport function dup() {}\n"
        assert [e.name for e in extract_js_exports(source)] == ["dup", "dup"]

    def test_unexported_ignored(self):
        source = "function hidden() {}\nconst local = () => 1\nclass Internal {}\n"
        assert extract_js_exports(source) == []

    def test_empty_source(self):
        assert extract_js_exports("") == []

    def test_async_window_is_bounded(self):
        """Test async outside the lookahead window is not detected."""
        source = "export function veryLongFunctionName(asyncOption) {}"
        assert extract_js_exports(source)[0].is_async is False

    @pytest.mark.parametrize("source,expected", [
        # "async" at offset 20 ends exactly on the 25 character boundary
        ("export function run(asyncMode) {}", True),
        ("export function runs(asyncMode) {}", False),
    ])
    def test_named_async_window_edge(self, source, expected):
        assert extract_js_exports(source)[0].is_async is expected

    @pytest.mark.parametrize("source,expected", [
        # "async" at offset 40 ends exactly on the 45 character boundary
        ("export const handleIncomingWebsocket = (asyncFlag) => {}", True),
        ("export const handleIncomingWebsockets = (asyncFlag) => {}", False),
    ])
    def test_arrow_async_window_edge(self, source, expected):
        assert extract_js_exports(source)[0].is_async is expected

    @pytest.mark.parametrize("source,expected", [
        # "async" at offset 30 ends exactly on the 35 character boundary
        ("export default function parse(asyncMode) {}", True),
        ("export default function parser(asyncMode) {}", False),
    ])
    def test_default_async_window_edge(self, source, expected):
        symbol = extract_js_exports(source)[0]
        assert symbol.is_default is True
        assert symbol.is_async is expected

    def test_to_dict(self):
        data = extract_js_exports(CALCULATOR_JS)[0].to_dict()
        assert data["kind"] == "class"
        assert data["methods"][0] == {"name": "constructor", "signature": "constructor(initial)"}


class TestPythonExports:
    """Tests for Python export extraction."""

    def test_private_function_excluded(self):
        assert extract_python_exports("def _helper(): pass") == []

    def test_public_function(self):
        exports = extract_python_exports("def public_fn(x): pass")
        assert len(exports) == 1
        assert exports[0].name == "public_fn"
        assert exports[0].kind == SymbolKind.FUNCTION
        assert exports[0].signature == "public_fn(x)"

    def test_async_function(self):
        exports = extract_python_exports("async def fetch(url, timeout=10):\n    pass\n")
        assert exports[0].is_async is True
        assert exports[0].signature == "fetch(url, timeout=10)"

    def test_nested_definitions_ignored(self):
        source = "class Service:\n    def run(self):\n        pass\n\ndef main():\n    pass\n"
        exports = extract_python_exports(source)
        assert [(e.kind, e.name) for e in exports] == [
            (SymbolKind.FUNCTION, "main"),
            (SymbolKind.CLASS, "Service"),
        ]

    def test_class_with_bases(self):
        exports = extract_python_exports("class Repo(Base, Mixin):\n    pass\n")
        cls = exports[0]
        assert cls.signature == "class Repo(Base, Mixin)"
        assert cls.base_name == "Base, Mixin"
        assert cls.methods == []

    def test_class_without_bases(self):
        exports = extract_python_exports("class Plain:\n    pass\n")
        assert exports[0].signature == "class Plain"
        assert exports[0].base_name is None

    def test_private_class_kept(self):
        """Test that only functions are filtered by underscore."""
        exports = extract_python_exports("class _Internal:\n    pass\n")
        assert exports[0].name == "_Internal"


class TestImports:
    """Tests for import extraction."""

    def test_js_import_forms(self):
        source = """\
import React from 'react'
import { useState, useEffect } from "react"
import * as path from 'path'
import Default, { named } from './local'
import './styles.css'
"""
        assert extract_js_imports(source) == [
            "react", "react", "path", "./local", "./styles.css"
        ]

    def test_js_multiline_named_import(self):
        source = "import {\n  a,\n  b,\n} from '../utils'\n"
        assert extract_js_imports(source) == ["../utils"]

    def test_js_no_imports(self):
        assert extract_js_imports("const x = require('fs')") == []

    def test_python_import_forms(self):
        source = """\
import os
import os.path
from collections import OrderedDict
from . import sibling
from ..pkg.module import thing
"""
        assert extract_python_imports(source) == [
            "os", "os.path", "collections", ".", "..pkg.module"
        ]

    def test_python_multiple_names(self):
        assert extract_python_imports("import os, sys\n") == ["os"]

    def test_python_indented_import_ignored(self):
        source = "def f():\n    import json\n"
        assert extract_python_imports(source) == []


class TestDispatch:
    """Tests for language dispatch helpers."""

    @pytest.mark.parametrize("language", [SourceLanguage.JAVASCRIPT, SourceLanguage.TYPESCRIPT])
    def test_javascript_family(self, language):
        source = "import x from 'x'\nexport function f() {}\n"
        assert [e.name for e in extract_exports(language, source)] == ["f"]
        assert extract_imports(language, source) == ["x"]

    def test_python(self):
        source = "import x\ndef f():\n    pass\n"
        assert [e.name for e in extract_exports(SourceLanguage.PYTHON, source)] == ["f"]
        assert extract_imports(SourceLanguage.PYTHON, source) == ["x"]

    def test_exported_symbol_defaults(self):
        symbol = ExportedSymbol(kind=SymbolKind.FUNCTION, name="f", signature="f()")
        assert symbol.methods == []
        assert symbol.base_name is None
