"""Tree-sitter backed parser producing SyntaxNode trees."""

import logging
from pathlib import PurePath
from typing import Any

import tree_sitter
import tree_sitter_typescript

from unused_deps.exceptions import ParseError
from unused_deps.scanner.syntax_tree import NodeKind, SyntaxNode

logger = logging.getLogger(__name__)

# tree-sitter node type -> extractor node kind
_KIND_MAP: dict[str, NodeKind] = {
    "program": NodeKind.PROGRAM,
    "import_statement": NodeKind.IMPORT_DECLARATION,
    "import_alias": NodeKind.IMPORT_DECLARATION,
    "import_clause": NodeKind.IMPORT_CLAUSE,
    "named_imports": NodeKind.NAMED_IMPORTS,
    "namespace_import": NodeKind.NAMESPACE_IMPORT,
    "identifier": NodeKind.IDENTIFIER,
    "string": NodeKind.STRING_LITERAL,
}

# JSX may appear in any JavaScript file
_TSX_SUFFIXES = {".tsx", ".jsx", ".js", ".mjs", ".cjs"}


class SourceParser:
    """Parses TypeScript/JavaScript source text into a SyntaxNode tree."""

    def __init__(self) -> None:
        self._parsers: dict[str, tree_sitter.Parser] = {}

    def parse(self, source: str, file_name: str = "temp.ts") -> SyntaxNode:
        """Parse source text.

        Args:
            source: Raw file content
            file_name: Name used to pick the grammar and in error messages

        Returns:
            Root node of the converted tree

        Raises:
            ParseError: If the text is not syntactically valid
        """
        parser = self._get_parser(self._grammar_for(file_name))
        tree = parser.parse(source.encode("utf-8"))

        if tree.root_node.has_error:
            raise ParseError(file_name, self._describe_error(tree.root_node))

        return self._convert(tree.root_node)

    def _get_parser(self, grammar: str) -> tree_sitter.Parser:
        """Get or create the tree-sitter parser for a grammar."""
        if grammar not in self._parsers:
            if grammar == "tsx":
                language = tree_sitter.Language(tree_sitter_typescript.language_tsx())
            else:
                language = tree_sitter.Language(tree_sitter_typescript.language_typescript())
            self._parsers[grammar] = tree_sitter.Parser(language)
            logger.debug(f"Loaded {grammar} grammar")

        return self._parsers[grammar]

    @staticmethod
    def _grammar_for(file_name: str) -> str:
        if PurePath(file_name).suffix.lower() in _TSX_SUFFIXES:
            return "tsx"
        return "typescript"

    @staticmethod
    def _describe_error(root: Any) -> str:
        """Locate the first error or missing node in the tree."""
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == "ERROR" or node.is_missing:
                line, column = node.start_point
                return f"syntax error at line {line + 1}, column {column + 1}"
            stack.extend(reversed(node.children))

        return "syntax error"

    def _convert(self, ts_root: Any) -> SyntaxNode:
        """Convert a tree-sitter tree into SyntaxNodes.

        Anonymous tokens and comments are dropped. Conversion is iterative so
        deeply nested sources cannot exhaust the interpreter stack.
        """
        root = SyntaxNode(kind=_KIND_MAP.get(ts_root.type, NodeKind.OTHER))
        stack = [(ts_root, root)]

        while stack:
            ts_node, node = stack.pop()
            named_index = 0

            for index, ts_child in enumerate(ts_node.children):
                if not ts_child.is_named or ts_child.type == "comment":
                    continue

                named_index += 1

                if ts_child.type == "import_require_clause":
                    self._append_require_clause(ts_child, node)
                    continue

                field_name = ts_node.field_name_for_child(index)

                # import x = A.B: the aliased entity acts as the specifier
                if ts_node.type == "import_alias" and named_index > 1:
                    field_name = "source"

                child = node.append(self._make_node(ts_child, field_name))
                stack.append((ts_child, child))

        return root

    def _append_require_clause(self, ts_clause: Any, declaration: SyntaxNode) -> None:
        """Normalize `import x = require("y")` into the default-import shape."""
        clause = SyntaxNode(kind=NodeKind.IMPORT_CLAUSE)

        for ts_child in ts_clause.named_children:
            if ts_child.type == "identifier":
                clause.append(self._make_node(ts_child))
            elif ts_child.type == "string":
                declaration.append(self._make_node(ts_child, "source"))

        declaration.append(clause)

    @staticmethod
    def _make_node(ts_node: Any, field_name: str | None = None) -> SyntaxNode:
        kind = _KIND_MAP.get(ts_node.type, NodeKind.OTHER)
        text = None

        if kind is NodeKind.STRING_LITERAL and ts_node.text is not None:
            # Strip the surrounding quotes, keep the content as written
            text = ts_node.text.decode("utf-8")[1:-1]
        elif kind is NodeKind.IDENTIFIER and ts_node.text is not None:
            text = ts_node.text.decode("utf-8")

        return SyntaxNode(kind=kind, text=text, field_name=field_name)
