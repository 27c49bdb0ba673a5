"""Declared versus used dependency comparison."""

from collections.abc import Set


def find_unused_dependencies(declared: Set[str], used: Set[str]) -> set[str]:
    """Return the declared dependencies that are never used.

    Args:
        declared: Names from the manifest
        used: Module names referenced by the scanned sources

    Returns:
        declared minus used
    """
    return set(declared) - set(used)
