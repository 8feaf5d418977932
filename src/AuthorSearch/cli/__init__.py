"""CLI package for AuthorSearch command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "cli", "main"]

from AuthorSearch.cli.runner import CommandRunner
from AuthorSearch.cli.ui import cli


def main() -> None:
    """Run AuthorSearch CLI.

    Entry point referenced by console script in pyproject.toml.
    """
    cli()
