from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Sequence


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Validated search parameters for one incoming query.

    Built by the parameter normalizer; the compiler and the execution adapter
    never see raw request values.

    Attributes:
        raw_query: Query text exactly as received.
        query: Lower-cased query text.
        autocomplete: Whether the last word is prefix-matched.
        limit: Page size, always positive.
        skip: Number of leading results to skip.
    """

    raw_query: str
    query: str
    autocomplete: bool
    limit: int
    skip: int


@dataclass(frozen=True, slots=True)
class SearchEnvelope:
    """Search response: one result page plus pagination bookkeeping.

    Attributes:
        total_count: Number of documents matching the query.
        count: Number of documents in ``results``.
        last_item_index: ``skip + count`` when it does not exceed
            ``total_count``, otherwise None.
        results: Author documents, best match first.
    """

    total_count: int
    count: int
    last_item_index: Optional[int]
    results: Sequence[Mapping[str, Any]] = field(default_factory=tuple)

    @classmethod
    def empty(cls) -> SearchEnvelope:
        return cls(total_count=0, count=0, last_item_index=None, results=())

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the envelope."""
        return {
            "totalCount": self.total_count,
            "count": self.count,
            "lastItemIndex": self.last_item_index,
            "results": [dict(document) for document in self.results],
        }


def compute_last_item_index(skip: int, count: int, total_count: int) -> int | None:
    """Return the index after the last returned item, or None past the end."""
    last_item_index = skip + count
    return last_item_index if last_item_index <= total_count else None
