"""Import extraction from parsed TypeScript/JavaScript sources."""

import logging
from enum import Enum
from pathlib import Path

from unused_deps.exceptions import FileReadError
from unused_deps.scanner.source_parser import SourceParser
from unused_deps.scanner.syntax_tree import NodeKind, SyntaxNode, walk

logger = logging.getLogger(__name__)


class Bindings(Enum):
    """What an import clause binds besides its default name."""

    NONE = "none"
    NAMED = "named"
    NAMESPACE = "namespace"


class ImportExtractor:
    """Recovers module specifiers referenced by import statements."""

    def __init__(self, parser: SourceParser | None = None) -> None:
        """Initialize import extractor.

        Args:
            parser: Parser used by extract_file (created if omitted)
        """
        self.parser = parser or SourceParser()

    def extract(self, tree: SyntaxNode) -> set[str]:
        """Extract every module specifier referenced in a tree.

        Nodes that do not look like an import are skipped, so this never
        fails on unusual input.

        Args:
            tree: Root of a parsed file

        Returns:
            Set of module names exactly as written in the source
        """
        dependencies: set[str] = set()

        for node in walk(tree):
            if node.kind is NodeKind.IMPORT_DECLARATION:
                library_name = self._process_import_declaration(node)
            elif node.kind in {NodeKind.NAMED_IMPORTS, NodeKind.NAMESPACE_IMPORT}:
                # specifier lives on the enclosing import statement
                library_name = self._library_name(node)
            else:
                continue

            if library_name:
                dependencies.add(library_name)

        return dependencies

    def extract_file(self, file_path: Path) -> set[str]:
        """Read, parse and extract a single file.

        Args:
            file_path: Source file to analyze

        Returns:
            Set of module names

        Raises:
            FileReadError: If the file cannot be read
            ParseError: If the file does not parse
        """
        try:
            code = Path(file_path).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(file_path, str(e)) from e

        tree = self.parser.parse(code, file_name=str(file_path))
        return self.extract(tree)

    def _process_import_declaration(self, declaration: SyntaxNode) -> str | None:
        """Handle whole-module and default imports.

        Named and namespace bindings are picked up when the walk reaches
        their own nodes.
        """
        clause = declaration.child_of_kind(NodeKind.IMPORT_CLAUSE)

        # import "pkg"
        if clause is None:
            return self._literal_specifier(declaration)

        # import React from "react"
        if clause.child_of_kind(NodeKind.IDENTIFIER) is not None:
            return self._literal_specifier(declaration)

        if self.classify_bindings(clause) is Bindings.NONE:
            logger.debug("Import clause without bindings, skipping")

        return None

    @staticmethod
    def classify_bindings(clause: SyntaxNode) -> Bindings:
        """Determine which binding variant an import clause carries.

        Args:
            clause: IMPORT_CLAUSE node

        Returns:
            Exactly one of the Bindings variants
        """
        for child in clause.children:
            if child.kind is NodeKind.NAMED_IMPORTS:
                return Bindings.NAMED
            if child.kind is NodeKind.NAMESPACE_IMPORT:
                return Bindings.NAMESPACE

        return Bindings.NONE

    def _library_name(self, bindings: SyntaxNode) -> str | None:
        """Find the module name for a named or namespace binding.

        Walks bindings -> import clause -> import statement and reads the
        statement's specifier.
        """
        clause = bindings.parent
        if clause is None or clause.kind is not NodeKind.IMPORT_CLAUSE:
            return None

        if self.classify_bindings(clause) is Bindings.NONE:
            return None

        declaration = clause.parent
        if declaration is None or declaration.kind is not NodeKind.IMPORT_DECLARATION:
            return None

        return self._literal_specifier(declaration)

    @staticmethod
    def _literal_specifier(declaration: SyntaxNode) -> str | None:
        """Return the specifier text if it is a plain string literal."""
        specifier = declaration.child_by_field("source")

        if specifier is None or specifier.kind is not NodeKind.STRING_LITERAL:
            return None

        return specifier.text or None
