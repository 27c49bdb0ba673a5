"""Reporters package."""

from unused_deps.reporters.json_formats import JSONReporter
from unused_deps.reporters.terminal import TerminalReporter

__all__ = [
    "TerminalReporter",
    "JSONReporter",
]
