"""Exceptions raised by the unused dependency finder."""

from pathlib import Path


class UnusedDepsError(Exception):
    """Base exception for all unused-deps errors."""


class ManifestError(UnusedDepsError):
    """Raised when the dependency manifest is missing, unreadable or malformed."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot load manifest {path}: {reason}")


class NoSourceFilesError(UnusedDepsError):
    """Raised when the file pattern matches nothing."""

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        super().__init__(f"No source files match pattern '{pattern}'")


class ScanError(UnusedDepsError):
    """Base class for errors isolated to a single source file."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"{path}: {reason}")


class FileReadError(ScanError):
    """Raised when a source file cannot be read."""


class ParseError(ScanError):
    """Raised when a source file is not valid TypeScript."""
