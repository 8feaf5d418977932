"""Atlas Search backend adapter."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from AuthorSearch.backends.atlas.client import AtlasDataApiClient
from AuthorSearch.backends.atlas.pipeline import build_count_pipeline, build_page_pipeline, read_total_count
from AuthorSearch.core.query import CompoundClause

DEFAULT_EXCLUDE_FIELDS = ("__v", "aka")


@dataclass(slots=True)
class AtlasSearchBackend:
    """Author search backend running Atlas Search aggregations."""

    client: AtlasDataApiClient
    index: str = "default"
    stage: str = "$search"
    exclude_fields: tuple[str, ...] = DEFAULT_EXCLUDE_FIELDS
    name: str = "atlas"

    def fetch_page(self, clause: CompoundClause, *, skip: int, limit: int) -> list[dict[str, Any]]:
        """Fetch one page of matching authors, best match first.

        Args:
            clause: Compiled author query.
            skip: Number of leading matches to skip.
            limit: Maximum number of documents to return.

        Returns:
            Author documents without the excluded fields.
        """
        pipeline = build_page_pipeline(
            clause,
            skip=skip,
            limit=limit,
            exclude_fields=self.exclude_fields,
            index=self.index,
            stage=self.stage,
        )
        return self.client.aggregate(pipeline)

    def count(self, clause: CompoundClause) -> int:
        """Count every author matching the clause."""
        documents = self.client.aggregate(build_count_pipeline(clause, index=self.index, stage=self.stage))
        return read_total_count(documents)

    def close(self) -> None:
        self.client.close()
