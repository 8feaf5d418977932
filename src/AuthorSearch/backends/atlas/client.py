"""MongoDB Atlas Data API client."""

from __future__ import annotations

import random
import time
from typing import Any, Sequence

import requests

from AuthorSearch.utils.log import log

DEFAULT_TIMEOUT = 30.0
BASE_PAUSE = 0.8
MAX_SLEEP = 8.0
RETRYABLE_STATUS = {429, 500, 502, 503, 504}

HEADERS = {
    "User-Agent": "author-search/0.1",
    "Accept": "application/json",
    "Content-Type": "application/json",
}


class AtlasSearchError(RuntimeError):
    """Raised when the Data API answers with an unusable payload."""


class AtlasDataApiClient:
    """Low-level HTTP client for the Atlas Data API ``aggregate`` action."""

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        data_source: str,
        database: str,
        collection: str,
        timeout: float = DEFAULT_TIMEOUT,
        max_attempts: int = 1,
    ) -> None:
        """Initialize the client with a reusable HTTP session.

        Args:
            base_url: Data API endpoint root, e.g.
                ``https://data.mongodb-api.com/app/<app-id>/endpoint/data/v1``.
            api_key: Data API key sent in the ``api-key`` header.
            data_source: Linked cluster name.
            database: Database holding the authors collection.
            collection: Authors collection name.
            timeout: Request timeout in seconds.
            max_attempts: Total attempts for transient failures (1 = no retry).
        """
        self.base_url = base_url.rstrip("/")
        self.data_source = data_source
        self.database = database
        self.collection = collection
        self.timeout = timeout
        self.max_attempts = max(1, max_attempts)
        self._session = requests.Session()
        self._session.headers.update(HEADERS)
        self._session.headers["api-key"] = api_key

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()

    def aggregate(self, pipeline: Sequence[dict[str, Any]]) -> list[dict[str, Any]]:
        """Run an aggregation pipeline on the authors collection.

        Args:
            pipeline: Aggregation stages.

        Returns:
            Documents produced by the pipeline, in order.

        Raises:
            requests.RequestException: On transport or HTTP errors.
            AtlasSearchError: If the payload carries no document list.
        """
        body = {
            "dataSource": self.data_source,
            "database": self.database,
            "collection": self.collection,
            "pipeline": list(pipeline),
        }
        response = self._post_with_retry(f"{self.base_url}/action/aggregate", body=body)
        response.raise_for_status()

        payload = response.json()
        documents = payload.get("documents") if isinstance(payload, dict) else None
        if not isinstance(documents, list):
            raise AtlasSearchError("Atlas Data API response has no 'documents' list")
        return [document for document in documents if isinstance(document, dict)]

    def _post_with_retry(self, url: str, *, body: dict[str, Any]) -> requests.Response:
        """Issue POST, retrying transient failures up to ``max_attempts``."""
        last_error: Exception | None = None
        for attempt in range(1, self.max_attempts + 1):
            try:
                response = self._session.post(url, json=body, timeout=self.timeout)
                if response.status_code in RETRYABLE_STATUS:
                    raise requests.HTTPError(
                        f"HTTP {response.status_code}",
                        response=response,
                    )
                return response
            except (requests.Timeout, requests.ConnectionError, requests.HTTPError) as error:
                last_error = error
                if attempt < self.max_attempts:
                    delay = min(BASE_PAUSE * (2 ** (attempt - 1)) + random.uniform(0, 0.3), MAX_SLEEP)
                    log.debug(
                        "Atlas retry attempt=%d/%d delay=%.2fs error=%s",
                        attempt,
                        self.max_attempts,
                        delay,
                        error,
                    )
                    time.sleep(delay)

        assert last_error is not None
        raise last_error
