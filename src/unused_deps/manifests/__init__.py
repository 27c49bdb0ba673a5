"""Dependency manifest parsers."""

from unused_deps.manifests.package_json import PackageJsonParser

__all__ = [
    "PackageJsonParser",
]
