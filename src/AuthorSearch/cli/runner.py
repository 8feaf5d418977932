"""Command runner for coordinating CLI execution.

Manages logging configuration, component lifecycle, and error handling for
command execution.
"""

from __future__ import annotations

from typing import Any, Mapping

import click

from AuthorSearch.cli.commands import SearchCommand
from AuthorSearch.config import AppConfig
from AuthorSearch.renderers import create_output_writer
from AuthorSearch.services import create_search_service
from AuthorSearch.utils.log import configure_logging, log


class CommandRunner:
    """Orchestrates command execution with proper resource management."""

    def __init__(self, config: AppConfig) -> None:
        """Initialize command runner.

        Args:
            config: Application configuration.
        """
        self.config = config

    def run_search(self, action: str, params: Mapping[str, Any], *, pretty: bool = False) -> None:
        """Execute one search and print its envelope.

        Args:
            action: The CLI command name (e.g., 'search').
            params: Raw search parameters, passed through unchanged.
            pretty: Indent the JSON output.

        Raises:
            click.Abort: When the search fails.
        """
        configure_logging(
            level=self.config.runtime.level,
            action=action,
            log_to_file=self.config.runtime.to_file,
            log_dir=self.config.runtime.dir,
        )
        try:
            search_service = create_search_service(self.config)
            try:
                command = SearchCommand(
                    search_service=search_service,
                    output_writer=create_output_writer(pretty=pretty),
                    params=params,
                )
                command.execute()
            finally:
                search_service.close()
        except Exception as e:  # noqa: BLE001 - cli boundary
            log.error("Search failed: %s", e)
            raise click.Abort from e
