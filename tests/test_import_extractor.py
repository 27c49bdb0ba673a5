"""Tests for import extraction with named, namespace and whole-module imports."""

from pathlib import Path

import pytest

from unused_deps.exceptions import FileReadError, ParseError
from unused_deps.scanner.import_extractor import Bindings, ImportExtractor
from unused_deps.scanner.source_parser import SourceParser
from unused_deps.scanner.syntax_tree import NodeKind, SyntaxNode


@pytest.fixture
def extractor():
    """Create an extractor with its own parser."""
    return ImportExtractor(SourceParser())


def extract_from(extractor: ImportExtractor, code: str, file_name: str = "test.ts") -> set[str]:
    tree = extractor.parser.parse(code, file_name=file_name)
    return extractor.extract(tree)


class TestImportForms:
    """Tests for the import statement shapes that reference a module."""

    def test_named_imports(self, extractor) -> None:
        """Test named bindings yield the module name."""
        code = 'import { a, b } from "pkg-named";\n'

        assert extract_from(extractor, code) == {"pkg-named"}

    def test_namespace_import(self, extractor) -> None:
        """Test namespace imports yield the module name."""
        code = 'import * as ns from "pkg-ns";\n'

        assert extract_from(extractor, code) == {"pkg-ns"}

    def test_whole_module_import(self, extractor) -> None:
        """Test side-effect imports are recorded."""
        code = 'import "reflect-metadata";\n'

        assert extract_from(extractor, code) == {"reflect-metadata"}

    def test_default_import(self, extractor) -> None:
        """Test default imports are recorded."""
        code = 'import React from "react";\n'

        assert extract_from(extractor, code) == {"react"}

    def test_default_with_named_imports(self, extractor) -> None:
        """Test mixed default and named bindings."""
        code = 'import React, { useState } from "react";\n'

        assert extract_from(extractor, code) == {"react"}

    def test_default_with_namespace_import(self, extractor) -> None:
        """Test mixed default and namespace bindings."""
        code = "import def, * as everything from 'mixed-ns';\n"

        assert extract_from(extractor, code) == {"mixed-ns"}

    def test_single_quotes(self, extractor) -> None:
        """Test specifiers in single quotes."""
        code = "import { map } from 'rxjs/operators';\n"

        assert extract_from(extractor, code) == {"rxjs/operators"}

    def test_type_only_import(self, extractor) -> None:
        """Test TypeScript type-only imports."""
        code = 'import type { Request } from "express";\n'

        assert extract_from(extractor, code) == {"express"}

    def test_import_require(self, extractor) -> None:
        """Test TypeScript import-equals-require form."""
        code = 'import fs = require("fs-extra");\n'

        assert extract_from(extractor, code) == {"fs-extra"}

    def test_scoped_and_relative_specifiers_kept_verbatim(self, extractor) -> None:
        """Test specifiers are not normalized or resolved."""
        code = '''
import { Injectable } from "@angular/core";
import { helper } from "./helpers/util";
import merge from "lodash/merge";
'''

        assert extract_from(extractor, code) == {
            "@angular/core",
            "./helpers/util",
            "lodash/merge",
        }

    def test_many_imports_deduplicated(self, extractor) -> None:
        """Test repeated modules appear once."""
        code = '''
import { a } from "shared";
import { b } from "shared";
import * as c from "shared";
import "other";
'''

        assert extract_from(extractor, code) == {"shared", "other"}

    def test_tsx_file(self, extractor) -> None:
        """Test extraction from a TSX component."""
        code = '''
import React from "react";
import { Button } from "@mui/material";

export const App = () => <Button>Click</Button>;
'''

        assert extract_from(extractor, code, "App.tsx") == {"react", "@mui/material"}


class TestIgnoredConstructs:
    """Tests for constructs that contribute no reference."""

    def test_import_alias_of_entity_name(self, extractor) -> None:
        """Test import-equals of a namespace path is not a module reference."""
        code = '''
namespace Shapes { export const x = 1; }
import X = Shapes.x;
'''

        assert extract_from(extractor, code) == set()

    def test_dynamic_import_ignored(self, extractor) -> None:
        """Test dynamic import() calls are not counted."""
        code = 'async function load() { return import("lazy-pkg"); }\n'

        assert extract_from(extractor, code) == set()

    def test_require_call_ignored(self, extractor) -> None:
        """Test CommonJS require calls are not counted."""
        code = 'const x = require("cjs-pkg");\n'

        assert extract_from(extractor, code) == set()

    def test_reexport_ignored(self, extractor) -> None:
        """Test re-exports are not counted as imports."""
        code = 'export { thing } from "reexported";\n'

        assert extract_from(extractor, code) == set()

    def test_empty_specifier(self, extractor) -> None:
        """Test an empty string specifier is not a reference."""
        code = 'import "";\n'

        assert extract_from(extractor, code) == set()

    def test_no_imports(self, extractor) -> None:
        """Test files without imports."""
        code = 'export const answer: number = 42;\n'

        assert extract_from(extractor, code) == set()


class TestHandBuiltTrees:
    """Tests against trees built directly from SyntaxNodes."""

    def test_computed_specifier(self, extractor) -> None:
        """Test a non-literal specifier contributes nothing."""
        tree = SyntaxNode(NodeKind.PROGRAM, [
            SyntaxNode(NodeKind.IMPORT_DECLARATION, [
                SyntaxNode(NodeKind.IMPORT_CLAUSE, [
                    SyntaxNode(NodeKind.NAMED_IMPORTS, [
                        SyntaxNode(NodeKind.IDENTIFIER, text="a"),
                    ]),
                ]),
                SyntaxNode(NodeKind.OTHER, field_name="source"),
            ]),
        ])

        assert extractor.extract(tree) == set()

    def test_named_imports_found_through_parent_links(self, extractor) -> None:
        """Test the upward walk from named bindings to the statement."""
        tree = SyntaxNode(NodeKind.PROGRAM, [
            SyntaxNode(NodeKind.IMPORT_DECLARATION, [
                SyntaxNode(NodeKind.IMPORT_CLAUSE, [
                    SyntaxNode(NodeKind.NAMED_IMPORTS),
                ]),
                SyntaxNode(NodeKind.STRING_LITERAL, text="pkg-named", field_name="source"),
            ]),
        ])

        assert extractor.extract(tree) == {"pkg-named"}

    def test_clause_without_bindings(self, extractor) -> None:
        """Test a clause with neither default nor bindings contributes nothing."""
        tree = SyntaxNode(NodeKind.PROGRAM, [
            SyntaxNode(NodeKind.IMPORT_DECLARATION, [
                SyntaxNode(NodeKind.IMPORT_CLAUSE),
                SyntaxNode(NodeKind.STRING_LITERAL, text="nothing", field_name="source"),
            ]),
        ])

        assert extractor.extract(tree) == set()

    def test_orphan_bindings(self, extractor) -> None:
        """Test bindings without an enclosing statement are skipped."""
        tree = SyntaxNode(NodeKind.PROGRAM, [
            SyntaxNode(NodeKind.NAMED_IMPORTS),
            SyntaxNode(NodeKind.IMPORT_CLAUSE, [
                SyntaxNode(NodeKind.NAMESPACE_IMPORT),
            ]),
        ])

        assert extractor.extract(tree) == set()

    def test_declaration_missing_specifier(self, extractor) -> None:
        """Test a declaration with no source child."""
        tree = SyntaxNode(NodeKind.IMPORT_DECLARATION)

        assert extractor.extract(tree) == set()

    def test_classify_bindings(self) -> None:
        """Test the bindings variant is exactly one of the three."""
        named = SyntaxNode(NodeKind.IMPORT_CLAUSE, [SyntaxNode(NodeKind.NAMED_IMPORTS)])
        namespace = SyntaxNode(NodeKind.IMPORT_CLAUSE, [
            SyntaxNode(NodeKind.IDENTIFIER, text="d"),
            SyntaxNode(NodeKind.NAMESPACE_IMPORT),
        ])
        default_only = SyntaxNode(NodeKind.IMPORT_CLAUSE, [
            SyntaxNode(NodeKind.IDENTIFIER, text="d"),
        ])

        assert ImportExtractor.classify_bindings(named) is Bindings.NAMED
        assert ImportExtractor.classify_bindings(namespace) is Bindings.NAMESPACE
        assert ImportExtractor.classify_bindings(default_only) is Bindings.NONE


class TestExtractFile:
    """Tests for reading and extracting a file in one step."""

    def test_extract_file(self, extractor, tmp_path: Path) -> None:
        """Test extraction from a file on disk."""
        file = tmp_path / "main.ts"
        file.write_text('import { z } from "zod";\n')

        assert extractor.extract_file(file) == {"zod"}

    def test_missing_file(self, extractor, tmp_path: Path) -> None:
        """Test unreadable files raise FileReadError."""
        with pytest.raises(FileReadError):
            extractor.extract_file(tmp_path / "missing.ts")

    def test_syntax_error(self, extractor, tmp_path: Path) -> None:
        """Test invalid files raise ParseError."""
        file = tmp_path / "broken.ts"
        file.write_text('import { from "x"\nfunction (\n')

        with pytest.raises(ParseError):
            extractor.extract_file(file)
