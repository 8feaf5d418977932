"""Search service layer for author name lookup."""

from __future__ import annotations

from concurrent.futures import FIRST_EXCEPTION, ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol, Sequence

from AuthorSearch.core.compiler import SEARCH_FIELDS, compile_author_query
from AuthorSearch.core.models import SearchEnvelope, compute_last_item_index
from AuthorSearch.core.params import DEFAULT_LIMIT, MAX_LIMIT, MAX_SKIP, normalize_search_params
from AuthorSearch.core.query import CompoundClause, FuzzyOptions
from AuthorSearch.utils.log import log


class AuthorSearchBackend(Protocol):
    """Protocol for an external text search capability over authors."""

    name: str

    def fetch_page(self, clause: CompoundClause, *, skip: int, limit: int) -> Sequence[Mapping[str, Any]]:
        """Return one page of matching documents ranked by relevance."""
        raise NotImplementedError

    def count(self, clause: CompoundClause) -> int:
        """Return the number of documents matching the clause."""
        raise NotImplementedError

    def close(self) -> None:
        """Close resources held by backend."""
        raise NotImplementedError


@dataclass(slots=True)
class AuthorSearchService:
    """Application service answering autocomplete-style author searches."""

    backend: AuthorSearchBackend
    fields: tuple[str, ...] = SEARCH_FIELDS
    fuzzy: FuzzyOptions = field(default_factory=FuzzyOptions)
    default_limit: int = DEFAULT_LIMIT
    max_limit: int = MAX_LIMIT
    max_skip: int = MAX_SKIP
    default_autocomplete: bool = True

    def search(self, params: Mapping[str, Any]) -> SearchEnvelope:
        """Run a search from raw request parameters.

        Args:
            params: Raw parameters as received (``query``, ``autocomplete``,
                ``limit``, ``skip``).

        Returns:
            The result envelope. Empty queries yield the empty envelope.

        Raises:
            Exception: Any backend failure, unchanged.
        """
        request = normalize_search_params(
            params,
            default_limit=self.default_limit,
            max_limit=self.max_limit,
            max_skip=self.max_skip,
            default_autocomplete=self.default_autocomplete,
        )
        if request is None:
            return SearchEnvelope.empty()

        clause = compile_author_query(
            request.query,
            autocomplete=request.autocomplete,
            fields=self.fields,
            fuzzy=self.fuzzy,
        )
        if clause is None:
            log.debug("Query has no words, returning empty result: query=%r", request.raw_query)
            return SearchEnvelope.empty()
        log.debug("Compiled clause: %s", clause.to_dict())

        results, total_count = self.execute(clause, skip=request.skip, limit=request.limit)
        envelope = assemble_envelope(results, total_count, skip=request.skip)
        log.info(
            "Search completed: backend=%s query=%r total=%d count=%d",
            self.backend.name,
            request.query,
            envelope.total_count,
            envelope.count,
        )
        return envelope

    def execute(
        self,
        clause: CompoundClause,
        *,
        skip: int,
        limit: int,
    ) -> tuple[list[Mapping[str, Any]], int]:
        """Fetch a result page and the total count concurrently.

        Both calls must succeed. The first failure is re-raised as is, without
        waiting for the other call, whose result is then discarded.
        """
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="author-search")
        try:
            page_future = executor.submit(self.backend.fetch_page, clause, skip=skip, limit=limit)
            count_future = executor.submit(self.backend.count, clause)
            done, _ = wait((page_future, count_future), return_when=FIRST_EXCEPTION)

            for future in (page_future, count_future):
                if future not in done:
                    continue
                error = future.exception()
                if error is not None:
                    branch = "page" if future is page_future else "count"
                    log.warning("Search backend failed: backend=%s branch=%s error=%s", self.backend.name, branch, error)
                    raise error

            return list(page_future.result()), count_future.result()
        finally:
            executor.shutdown(wait=False, cancel_futures=True)

    def close(self) -> None:
        """Close the backend and release external resources."""
        self.backend.close()


def assemble_envelope(
    results: Sequence[Mapping[str, Any]],
    total_count: int,
    *,
    skip: int,
) -> SearchEnvelope:
    """Combine a result page and its total count into the response envelope."""
    count = len(results)
    return SearchEnvelope(
        total_count=total_count,
        count=count,
        last_item_index=compute_last_item_index(skip, count, total_count),
        results=tuple(results),
    )
