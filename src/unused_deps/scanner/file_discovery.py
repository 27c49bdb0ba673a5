"""Source file discovery from glob patterns."""

import fnmatch
import glob
import logging
from pathlib import Path

from unused_deps.config import get_config

logger = logging.getLogger(__name__)


class FileDiscovery:
    """Discovers source files in a project."""
    
    def __init__(
        self,
        project_root: Path,
        pattern: str | None = None,
        exclude_patterns: list[str] | None = None
    ) -> None:
        """Initialize file discovery.
        
        Args:
            project_root: Directory the pattern is resolved against
            pattern: Glob pattern for files to check (e.g. "src/**/*.ts")
            exclude_patterns: Glob patterns to exclude
        """
        self.project_root = Path(project_root)
        
        config = get_config()
        if pattern is None:
            pattern = config.files_pattern
        if exclude_patterns is None:
            exclude_patterns = config.exclude_patterns
        
        self.pattern = pattern
        self.exclude_patterns = exclude_patterns
    
    def find_source_files(self) -> list[Path]:
        """Find all files matching the pattern.
        
        Returns:
            Sorted list of file paths
        """
        matches = glob.glob(self.pattern, root_dir=self.project_root, recursive=True)
        
        source_files: list[Path] = []
        
        for match in matches:
            file_path = self.project_root / match
            
            if not file_path.is_file():
                continue
            
            if self._should_exclude(file_path):
                logger.debug(f"Excluded {file_path}")
                continue
            
            source_files.append(file_path)
        
        return sorted(source_files)
    
    def _should_exclude(self, file_path: Path) -> bool:
        """Check if file should be excluded based on patterns.
        
        Args:
            file_path: Path to file
            
        Returns:
            True if file should be excluded
        """
        try:
            relative = file_path.relative_to(self.project_root)
        except ValueError:
            return False
        
        relative_str = relative.as_posix()
        
        for pattern in self.exclude_patterns:
            # fnmatch's "*" already crosses directory separators
            pattern_normalized = pattern.replace("**/", "*").replace("/**", "/*")
            
            if fnmatch.fnmatch(relative_str, pattern_normalized):
                return True
            
            # Also check each parent directory
            for parent in relative.parents:
                if fnmatch.fnmatch(parent.as_posix(), pattern_normalized):
                    return True
        
        return False
