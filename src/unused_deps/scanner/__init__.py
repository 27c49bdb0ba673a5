"""Source scanning package."""

from unused_deps.scanner.concurrent_scanner import BoundedScanner, scan_files
from unused_deps.scanner.file_discovery import FileDiscovery
from unused_deps.scanner.import_extractor import Bindings, ImportExtractor
from unused_deps.scanner.source_parser import SourceParser
from unused_deps.scanner.syntax_tree import NodeKind, SyntaxNode, walk

__all__ = [
    "BoundedScanner",
    "scan_files",
    "FileDiscovery",
    "Bindings",
    "ImportExtractor",
    "SourceParser",
    "NodeKind",
    "SyntaxNode",
    "walk",
]
