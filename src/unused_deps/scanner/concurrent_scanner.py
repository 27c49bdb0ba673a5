"""Bounded concurrent scanning of source files."""

import asyncio
import logging
from collections.abc import Callable, Sequence
from pathlib import Path

from unused_deps.exceptions import FileReadError, ScanError
from unused_deps.models import FileOutcome, ScanResult, UsedDependencies
from unused_deps.scanner.import_extractor import ImportExtractor
from unused_deps.scanner.source_parser import SourceParser

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]

DEFAULT_MAX_PARALLEL_FILES = 100


class BoundedScanner:
    """Scans many files with at most N of them in flight."""

    def __init__(
        self,
        max_parallel_files: int = DEFAULT_MAX_PARALLEL_FILES,
        parser: SourceParser | None = None,
        extractor: ImportExtractor | None = None,
    ) -> None:
        """Initialize scanner.

        Args:
            max_parallel_files: Maximum number of files read and parsed at once
            parser: Syntax parser (created if omitted)
            extractor: Import extractor (created if omitted)
        """
        if isinstance(max_parallel_files, bool) or not isinstance(max_parallel_files, int):
            raise ValueError(f"max_parallel_files must be an integer, got {max_parallel_files!r}")
        if max_parallel_files < 1:
            raise ValueError(f"max_parallel_files must be positive, got {max_parallel_files}")

        self.max_parallel_files = max_parallel_files
        self.parser = parser or SourceParser()
        self.extractor = extractor or ImportExtractor(self.parser)

    async def scan(
        self,
        files: Sequence[Path],
        used: UsedDependencies,
        on_progress: ProgressCallback | None = None,
    ) -> ScanResult:
        """Scan files and merge their imports into a shared set.

        A file that cannot be read or parsed is recorded as failed and does
        not stop the others.

        Args:
            files: Source files to scan
            used: Aggregate that receives every file's references
            on_progress: Called with (completed, total) once per file

        Returns:
            Outcome of every file plus the aggregate contents
        """
        semaphore = asyncio.Semaphore(self.max_parallel_files)
        total = len(files)
        completed = 0

        async def scan_one(file_path: Path) -> FileOutcome:
            nonlocal completed

            async with semaphore:
                outcome = await self._process_file(file_path, used)

            completed += 1
            self._report_progress(on_progress, completed, total)
            return outcome

        tasks = [scan_one(Path(file_path)) for file_path in files]
        outcomes = list(await asyncio.gather(*tasks))

        failed = sum(1 for o in outcomes if not o.ok)
        logger.debug(f"Scanned {total} files, {failed} failed, {len(used)} unique imports")

        return ScanResult(outcomes=outcomes, used=used.snapshot())

    async def _process_file(self, file_path: Path, used: UsedDependencies) -> FileOutcome:
        """Read, parse, extract and merge one file, never raising."""
        try:
            code = await self._read_file(file_path)

            # Parsing and extraction are CPU bound and run without suspending
            tree = self.parser.parse(code, file_name=str(file_path))
            references = frozenset(self.extractor.extract(tree))

        except ScanError as e:
            logger.debug(f"Skipping {file_path}: {e.reason}")
            return FileOutcome(path=file_path, error=e)
        except Exception as e:
            logger.debug(f"Unexpected error scanning {file_path}: {e}")
            return FileOutcome(path=file_path, error=ScanError(file_path, str(e)))

        used.add_all(references)
        logger.debug(f"Found dependencies in {file_path}: {sorted(references)}")

        return FileOutcome(path=file_path, references=references)

    @staticmethod
    async def _read_file(file_path: Path) -> str:
        """Read a file without blocking the event loop."""
        try:
            return await asyncio.to_thread(file_path.read_text, encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise FileReadError(file_path, str(e)) from e

    @staticmethod
    def _report_progress(
        on_progress: ProgressCallback | None,
        completed: int,
        total: int,
    ) -> None:
        """Forward a tick to the progress sink, ignoring sink failures."""
        if on_progress is None:
            return

        try:
            on_progress(completed, total)
        except Exception as e:
            logger.debug(f"Progress callback failed: {e}")


def scan_files(
    files: Sequence[Path],
    max_parallel_files: int = DEFAULT_MAX_PARALLEL_FILES,
    used: UsedDependencies | None = None,
    on_progress: ProgressCallback | None = None,
) -> ScanResult:
    """Synchronous entry point for scanning files.

    Args:
        files: Source files to scan
        max_parallel_files: Maximum files in flight
        used: Aggregate to merge into (a fresh one if omitted)
        on_progress: Progress callback

    Returns:
        Scan result
    """
    scanner = BoundedScanner(max_parallel_files=max_parallel_files)

    if used is None:
        used = UsedDependencies()

    return asyncio.run(scanner.scan(files, used, on_progress=on_progress))
