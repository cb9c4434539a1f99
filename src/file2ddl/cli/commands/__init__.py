"""CLI command implementations."""

from file2ddl.cli.commands import analyze, dialects

__all__ = [
    "analyze",
    "dialects",
]
