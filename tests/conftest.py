"""Test configuration."""

import json

import pytest
from pathlib import Path

from unused_deps.config import reset_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no test sees another test's configuration."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_project_dir(tmp_path):
    """Create a sample project directory."""
    project = tmp_path / "sample_project"
    project.mkdir(parents=True, exist_ok=True)
    return project


@pytest.fixture
def sample_package_json(sample_project_dir):
    """Create a sample package.json file."""
    manifest = sample_project_dir / "package.json"
    manifest.write_text(json.dumps({
        "name": "sample",
        "version": "1.0.0",
        "dependencies": {
            "left-pad": "^1.3.0",
            "lodash": "^4.17.21",
            "react": "^18.2.0",
        },
        "devDependencies": {
            "typescript": "^5.4.0",
        },
    }, indent=2))
    
    return manifest


@pytest.fixture
def sample_sources(sample_project_dir):
    """Create TypeScript sources that only use lodash."""
    src = sample_project_dir / "src"
    src.mkdir(parents=True, exist_ok=True)
    
    (src / "index.ts").write_text("""
import { debounce } from "lodash";
import { helper } from "./util";

export const run = debounce(() => helper(), 100);
""")
    (src / "util.ts").write_text("""
export function helper(): number {
    return 42;
}
""")
    
    return src


@pytest.fixture
def make_files():
    """Return a helper writing name -> content mappings into a directory."""
    def write_files(directory: Path, files: dict[str, str]) -> list[Path]:
        directory.mkdir(parents=True, exist_ok=True)
        paths = []
        
        for name, content in files.items():
            path = directory / name
            path.write_text(content)
            paths.append(path)
        
        return paths
    
    return write_files
