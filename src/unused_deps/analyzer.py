"""Core analyzer orchestrator."""

import asyncio
import logging
from pathlib import Path

from unused_deps.config import get_config, load_ignore_file
from unused_deps.differ import find_unused_dependencies
from unused_deps.exceptions import NoSourceFilesError
from unused_deps.manifests.package_json import PackageJsonParser
from unused_deps.models import DeclaredDependency, UnusedReport, UsedDependencies
from unused_deps.scanner.concurrent_scanner import BoundedScanner, ProgressCallback
from unused_deps.scanner.file_discovery import FileDiscovery

logger = logging.getLogger(__name__)


class UnusedDependencyAnalyzer:
    """Main analyzer orchestrator."""

    def __init__(
        self,
        project_root: Path,
        manifest_file: Path | None = None,
        files_pattern: str | None = None,
        max_parallel_files: int | None = None,
        include_dev: bool = False,
    ) -> None:
        """Initialize analyzer.

        Args:
            project_root: Directory the file pattern is resolved against
            manifest_file: Path to package.json (config default if omitted)
            files_pattern: Glob pattern for files to check
            max_parallel_files: Maximum number of files processed in parallel
            include_dev: If True, devDependencies count as declared
        """
        self.config = get_config()
        self.project_root = Path(project_root)

        if manifest_file is None:
            manifest_file = self.config.manifest_path
        manifest_file = Path(manifest_file)
        if not manifest_file.is_absolute():
            manifest_file = self.project_root / manifest_file

        self.manifest_file = manifest_file
        self.files_pattern = files_pattern or self.config.files_pattern
        if max_parallel_files is None:
            max_parallel_files = self.config.max_parallel_files

        self.max_parallel_files = max_parallel_files
        self.include_dev = include_dev

        self.scanner = BoundedScanner(max_parallel_files=self.max_parallel_files)

        self.file_discovery = FileDiscovery(self.project_root, pattern=self.files_pattern)

    def load_declared(self) -> dict[str, DeclaredDependency]:
        """Load declared dependencies from the manifest.

        Returns:
            Declared dependencies by name, minus ignored ones

        Raises:
            ManifestError: If the manifest is missing, unreadable or malformed
        """
        parser = PackageJsonParser(
            self.manifest_file,
            sections=self.config.manifest_sections,
            include_dev=self.include_dev,
        )
        declared = {dep.name: dep for dep in parser.parse()}

        ignored = load_ignore_file(self.manifest_file.parent)
        skipped = ignored & declared.keys()
        if skipped:
            logger.info(f"Ignoring {len(skipped)} dependencies listed in ignore file")

        return {name: dep for name, dep in declared.items() if name not in ignored}

    def discover_files(self) -> list[Path]:
        """Resolve the file pattern.

        Returns:
            Files to scan

        Raises:
            NoSourceFilesError: If nothing matches
        """
        files = self.file_discovery.find_source_files()

        if not files:
            raise NoSourceFilesError(self.files_pattern)

        logger.debug(f"Found files: {[str(f) for f in files]}")
        return files

    def analyze(self, on_progress: ProgressCallback | None = None) -> UnusedReport:
        """Run complete analysis.

        The manifest is loaded and files are discovered before any file is
        scanned, so fatal errors abort early.

        Args:
            on_progress: Called with (completed, total) once per file

        Returns:
            Unused dependency report
        """
        logger.info(f"Starting analysis of {self.manifest_file}")

        declared = self.load_declared()
        logger.info(f"Parsed {len(declared)} declared dependencies")

        files = self.discover_files()
        logger.info(f"Reading {len(files)} files...")

        used = UsedDependencies()
        result = asyncio.run(self.scanner.scan(files, used, on_progress=on_progress))

        logger.info("Finding unused dependencies...")
        unused = find_unused_dependencies(declared.keys(), result.used)

        return UnusedReport(
            manifest_path=self.manifest_file,
            declared=frozenset(declared),
            used=result.used,
            unused=sorted(unused),
            files_scanned=len(result.succeeded),
            errors=result.errors,
            details=declared,
        )
