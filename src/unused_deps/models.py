"""Core data models for the unused dependency finder."""

import threading
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from unused_deps.exceptions import ScanError


@dataclass
class DeclaredDependency:
    """A dependency listed in the manifest."""

    name: str
    version_spec: str = ""
    section: str = "dependencies"


class UsedDependencies:
    """Module names referenced by a scan, safe for concurrent inserts.

    One instance belongs to one scan run and is passed to the scanner
    explicitly.
    """

    def __init__(self, initial: Iterable[str] = ()) -> None:
        self._names: set[str] = set(initial)
        self._lock = threading.Lock()

    def add_all(self, names: Iterable[str]) -> None:
        """Merge names into the set as a single atomic step."""
        names = list(names)
        with self._lock:
            self._names.update(names)

    def snapshot(self) -> frozenset[str]:
        """Get an immutable copy of the current contents."""
        with self._lock:
            return frozenset(self._names)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._names

    def __len__(self) -> int:
        with self._lock:
            return len(self._names)


@dataclass
class FileOutcome:
    """Result of scanning one source file."""

    path: Path
    references: frozenset[str] = frozenset()
    error: ScanError | None = None

    @property
    def ok(self) -> bool:
        """Check if the file was read and parsed."""
        return self.error is None

    def __str__(self) -> str:
        """String representation."""
        if self.error is not None:
            return f"{self.path}: failed ({self.error.reason})"
        return f"{self.path}: {len(self.references)} reference(s)"


@dataclass
class ScanResult:
    """Outcome of a whole scan."""

    outcomes: list[FileOutcome]
    used: frozenset[str]

    @property
    def succeeded(self) -> list[FileOutcome]:
        """Outcomes of files that were processed."""
        return [o for o in self.outcomes if o.ok]

    @property
    def failed(self) -> list[FileOutcome]:
        """Outcomes of files that could not be read or parsed."""
        return [o for o in self.outcomes if not o.ok]

    @property
    def errors(self) -> list[ScanError]:
        """Per-file errors in input order."""
        return [o.error for o in self.outcomes if o.error is not None]


@dataclass
class UnusedReport:
    """Complete result of an unused dependency check."""

    manifest_path: Path
    declared: frozenset[str]
    used: frozenset[str]
    unused: list[str]
    files_scanned: int = 0
    errors: list[ScanError] = field(default_factory=list)
    details: dict[str, DeclaredDependency] = field(default_factory=dict)

    @property
    def files_failed(self) -> int:
        """Number of files skipped because of errors."""
        return len(self.errors)

    @property
    def has_unused(self) -> bool:
        """Check if any declared dependency is unused."""
        return bool(self.unused)
