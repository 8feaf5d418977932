"""Tests for the Atlas Data API client and backend adapter."""

import sys
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import requests

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from AuthorSearch.backends.atlas.backend import AtlasSearchBackend
from AuthorSearch.backends.atlas.client import AtlasDataApiClient, AtlasSearchError
from AuthorSearch.core.compiler import compile_author_query


def _response(status_code: int = 200, payload: object = None) -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"HTTP {status_code}", response=response)
    return response


def _client(max_attempts: int = 1) -> AtlasDataApiClient:
    return AtlasDataApiClient(
        base_url="https://data.example.test/app/x/endpoint/data/v1/",
        api_key="secret",
        data_source="Cluster0",
        database="app",
        collection="authors",
        timeout=5.0,
        max_attempts=max_attempts,
    )


class TestAtlasDataApiClient(unittest.TestCase):
    def test_aggregate_posts_pipeline(self) -> None:
        client = _client()
        documents = [{"_id": "1", "name": "Henry Ward Beecher"}]
        with patch.object(client._session, "post", return_value=_response(payload={"documents": documents})) as post:
            result = client.aggregate([{"$limit": 1}])

        self.assertEqual(result, documents)
        url = post.call_args.args[0]
        self.assertEqual(url, "https://data.example.test/app/x/endpoint/data/v1/action/aggregate")
        body = post.call_args.kwargs["json"]
        self.assertEqual(body["collection"], "authors")
        self.assertEqual(body["dataSource"], "Cluster0")
        self.assertEqual(body["pipeline"], [{"$limit": 1}])
        self.assertEqual(post.call_args.kwargs["timeout"], 5.0)
        self.assertEqual(client._session.headers["api-key"], "secret")

    def test_missing_documents_raises(self) -> None:
        client = _client()
        with patch.object(client._session, "post", return_value=_response(payload={"error": "bad"})):
            with self.assertRaises(AtlasSearchError):
                client.aggregate([])

    def test_client_error_is_not_retried(self) -> None:
        client = _client(max_attempts=3)
        with patch.object(client._session, "post", return_value=_response(400, payload={})) as post:
            with self.assertRaises(requests.HTTPError):
                client.aggregate([])
        self.assertEqual(post.call_count, 1)

    def test_transient_error_without_retry_raises(self) -> None:
        client = _client(max_attempts=1)
        with patch.object(client._session, "post", return_value=_response(503)) as post:
            with self.assertRaises(requests.HTTPError):
                client.aggregate([])
        self.assertEqual(post.call_count, 1)

    def test_transient_error_is_retried(self) -> None:
        client = _client(max_attempts=2)
        responses = [_response(503), _response(payload={"documents": []})]
        with patch.object(client._session, "post", side_effect=responses) as post, patch(
            "AuthorSearch.backends.atlas.client.time.sleep"
        ) as sleep:
            result = client.aggregate([])
        self.assertEqual(result, [])
        self.assertEqual(post.call_count, 2)
        sleep.assert_called_once()

    def test_connection_error_exhausts_attempts(self) -> None:
        client = _client(max_attempts=2)
        with patch.object(client._session, "post", side_effect=requests.ConnectionError("down")), patch(
            "AuthorSearch.backends.atlas.client.time.sleep"
        ):
            with self.assertRaises(requests.ConnectionError):
                client.aggregate([])


class TestAtlasSearchBackend(unittest.TestCase):
    def test_fetch_page_and_count(self) -> None:
        client = MagicMock()
        client.aggregate.side_effect = [[{"name": "Henry Ward Beecher"}], [{"totalCount": 3}]]
        backend = AtlasSearchBackend(client=client, index="authors")
        clause = compile_author_query("henry bee", autocomplete=True)
        assert clause is not None

        page = backend.fetch_page(clause, skip=2, limit=1)
        total = backend.count(clause)

        self.assertEqual(page, [{"name": "Henry Ward Beecher"}])
        self.assertEqual(total, 3)
        page_pipeline = client.aggregate.call_args_list[0].args[0]
        self.assertEqual(page_pipeline[0]["$search"]["index"], "authors")
        self.assertEqual(page_pipeline[1], {"$project": {"__v": 0, "aka": 0}})
        self.assertEqual(page_pipeline[2:], [{"$skip": 2}, {"$limit": 1}])

    def test_close_closes_client(self) -> None:
        client = MagicMock()
        AtlasSearchBackend(client=client).close()
        client.close.assert_called_once()


if __name__ == "__main__":
    unittest.main()
