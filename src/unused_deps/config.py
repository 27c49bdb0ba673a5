"""Configuration management for the unused dependency finder."""

import logging
from pathlib import Path
from typing import Any

import toml

logger = logging.getLogger(__name__)

IGNORE_FILE_NAME = ".unuseddepsignore"


class Config:
    """Application configuration."""

    def __init__(self, config_file: Path | None = None) -> None:
        """Initialize configuration.

        Args:
            config_file: Optional path to configuration file
        """
        self.config_file = config_file
        self._config: dict[str, Any] = self._load_config()

    def _load_config(self) -> dict[str, Any]:
        """Load configuration from file or defaults."""
        config: dict[str, Any] = self._get_defaults()

        if self.config_file and self.config_file.exists():
            try:
                file_config = toml.load(self.config_file)
                for section, values in file_config.items():
                    if isinstance(values, dict) and isinstance(config.get(section), dict):
                        config[section].update(values)
                    else:
                        config[section] = values
                logger.debug(f"Loaded config from {self.config_file}")
            except toml.TomlDecodeError as e:
                logger.warning(f"Invalid TOML in config file {self.config_file}: {e}")
            except OSError as e:
                logger.warning(f"Error loading config file {self.config_file}: {e}")

        return config

    @staticmethod
    def _get_defaults() -> dict[str, Any]:
        """Get default configuration values."""
        return {
            "scan": {
                "files": "src/**/*.ts",
                "max_parallel_files": 100,
                "exclude_patterns": [
                    "**/node_modules/**",
                    "**/.git/**",
                    "**/dist/**",
                    "**/build/**",
                    "**/coverage/**",
                ],
            },
            "manifest": {
                "path": "package.json",
                "sections": ["dependencies"],
            },
            "output": {
                "color": True,
            },
        }

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value using dot notation.

        Args:
            key: Configuration key (e.g., "scan.files")
            default: Default value if key not found

        Returns:
            Configuration value
        """
        keys = key.split(".")
        value: Any = self._config

        for k in keys:
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    @property
    def files_pattern(self) -> str:
        """Get glob pattern for files to check."""
        return str(self.get("scan.files", "src/**/*.ts"))

    @property
    def max_parallel_files(self) -> int:
        """Get maximum number of files processed in parallel."""
        return int(self.get("scan.max_parallel_files", 100))

    @property
    def exclude_patterns(self) -> list[str]:
        """Get file exclusion patterns."""
        return self.get("scan.exclude_patterns", [])

    @property
    def manifest_path(self) -> Path:
        """Get default manifest path."""
        return Path(self.get("manifest.path", "package.json"))

    @property
    def manifest_sections(self) -> list[str]:
        """Get package.json sections treated as declared dependencies."""
        return list(self.get("manifest.sections", ["dependencies"]))

    @property
    def color(self) -> bool:
        """Check if colored output is enabled."""
        return bool(self.get("output.color", True))


def load_ignore_file(directory: Path) -> set[str]:
    """Load dependency names to ignore from a .unuseddepsignore file.

    Args:
        directory: Directory containing the manifest

    Returns:
        Set of dependency names to ignore
    """
    ignore_file = directory / IGNORE_FILE_NAME
    ignored: set[str] = set()

    if not ignore_file.exists():
        return ignored

    try:
        with open(ignore_file, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()

                # Skip comments and empty lines
                if not line or line.startswith("#"):
                    continue

                ignored.add(line)

    except OSError as e:
        logger.warning(f"Cannot read ignore file {ignore_file}: {e}")

    return ignored


# Global config instance
_config: Config | None = None


def get_config(config_file: Path | None = None) -> Config:
    """Get or create global configuration instance.

    Args:
        config_file: Optional path to configuration file

    Returns:
        Config instance
    """
    global _config

    if _config is None or (config_file is not None and config_file != _config.config_file):
        _config = Config(config_file)

    return _config


def reset_config() -> None:
    """Drop the cached configuration instance."""
    global _config
    _config = None
