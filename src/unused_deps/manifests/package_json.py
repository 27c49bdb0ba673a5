"""Parser for npm package.json manifests."""

import json
import logging
from pathlib import Path

from unused_deps.exceptions import ManifestError
from unused_deps.models import DeclaredDependency

logger = logging.getLogger(__name__)

DEFAULT_SECTIONS = ("dependencies",)
DEV_SECTION = "devDependencies"


class PackageJsonParser:
    """Parser for package.json format.

    Any file name is accepted; the content is read as JSON.
    """
    
    def __init__(
        self,
        file_path: Path,
        sections: list[str] | tuple[str, ...] = DEFAULT_SECTIONS,
        include_dev: bool = False,
    ) -> None:
        """Initialize parser.
        
        Args:
            file_path: Path to package.json
            sections: Top-level keys holding declared dependencies
            include_dev: If True, also read devDependencies
            
        Raises:
            ManifestError: If the file does not exist
        """
        self.file_path = Path(file_path)
        
        if not self.file_path.is_file():
            raise ManifestError(self.file_path, "file not found")
        
        self.sections = list(sections)
        if include_dev and DEV_SECTION not in self.sections:
            self.sections.append(DEV_SECTION)
    
    def parse(self) -> list[DeclaredDependency]:
        """Parse package.json file.
        
        Returns:
            List of declared dependencies, in manifest order
            
        Raises:
            ManifestError: If the manifest cannot be read or is malformed
        """
        data = self._load()
        dependencies: list[DeclaredDependency] = []
        seen: set[str] = set()
        
        for section in self.sections:
            entries = data.get(section)
            
            if entries is None:
                continue
            
            if not isinstance(entries, dict):
                raise ManifestError(
                    self.file_path,
                    f'"{section}" must be an object, got {type(entries).__name__}',
                )
            
            for name, version_spec in entries.items():
                if name in seen:
                    continue
                
                seen.add(name)
                dependencies.append(
                    DeclaredDependency(
                        name=name,
                        version_spec=str(version_spec),
                        section=section,
                    )
                )
        
        logger.debug(f"Read {len(dependencies)} declared dependencies from {self.file_path}")
        return dependencies
    
    def _load(self) -> dict:
        """Read and decode the manifest.
        
        Raises:
            ManifestError: If the file is unreadable or not a JSON object
        """
        try:
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise ManifestError(self.file_path, str(e)) from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ManifestError(self.file_path, f"invalid JSON: {e}") from e
        
        if not isinstance(data, dict):
            raise ManifestError(self.file_path, "top level must be a JSON object")
        
        return data
