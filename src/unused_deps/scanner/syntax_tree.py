"""Language-neutral syntax tree consumed by the import extractor."""

import weakref
from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum


class NodeKind(Enum):
    """Node kinds the import extractor distinguishes."""
    
    PROGRAM = "program"
    IMPORT_DECLARATION = "import_declaration"
    IMPORT_CLAUSE = "import_clause"
    NAMED_IMPORTS = "named_imports"
    NAMESPACE_IMPORT = "namespace_import"
    IDENTIFIER = "identifier"
    STRING_LITERAL = "string_literal"
    OTHER = "other"


@dataclass(eq=False)
class SyntaxNode:
    """A node of a parsed source file.
    
    Children are owned top-down. The link back to the enclosing node is a
    weak reference, so a subtree never keeps its ancestors alive.
    """
    
    kind: NodeKind
    children: list["SyntaxNode"] = field(default_factory=list)
    text: str | None = None  # payload for literals and identifiers
    field_name: str | None = None  # role inside the parent, e.g. "source"
    _parent: "weakref.ReferenceType[SyntaxNode] | None" = field(
        default=None, repr=False, compare=False
    )
    
    def __post_init__(self) -> None:
        for child in self.children:
            child._parent = weakref.ref(self)
    
    @property
    def parent(self) -> "SyntaxNode | None":
        """Enclosing node, or None for the root."""
        if self._parent is None:
            return None
        return self._parent()
    
    def append(self, child: "SyntaxNode") -> "SyntaxNode":
        """Attach a child node and return it."""
        child._parent = weakref.ref(self)
        self.children.append(child)
        return child
    
    def child_of_kind(self, kind: NodeKind) -> "SyntaxNode | None":
        """Return the first direct child of the given kind."""
        for child in self.children:
            if child.kind is kind:
                return child
        return None
    
    def child_by_field(self, field_name: str) -> "SyntaxNode | None":
        """Return the first direct child playing the given role."""
        for child in self.children:
            if child.field_name == field_name:
                return child
        return None


def walk(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield every node of the tree, breadth first, starting with root."""
    todo = deque([root])
    while todo:
        node = todo.popleft()
        todo.extend(node.children)
        yield node
