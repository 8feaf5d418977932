"""Command implementations for AuthorSearch CLI.

Encapsulates business logic for commands, separated from CLI parameter
handling and output formatting.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from AuthorSearch.core.models import SearchEnvelope
from AuthorSearch.renderers import OutputWriter
from AuthorSearch.services.search import AuthorSearchService
from AuthorSearch.utils.log import log


@dataclass(slots=True)
class SearchCommand:
    """Run one author search and hand the envelope to the output writer."""

    search_service: AuthorSearchService
    output_writer: OutputWriter
    params: Mapping[str, Any]

    def execute(self) -> SearchEnvelope:
        """Execute the search with the raw parameters given on the command line."""
        log.debug("Running search params=%s", dict(self.params))
        envelope = self.search_service.search(self.params)
        self.output_writer.write_result(envelope)
        return envelope
