"""Search service layer for AuthorSearch.

Provides the backend-agnostic search service and a factory that wires it to
the configured backend.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from AuthorSearch.backends.registry import build_backend
from AuthorSearch.services.search import AuthorSearchBackend, AuthorSearchService, assemble_envelope

if TYPE_CHECKING:
    from AuthorSearch.config import AppConfig


def create_search_service(config: AppConfig) -> AuthorSearchService:
    """Create a search service backed by the configured backend.

    Args:
        config: Application configuration.

    Returns:
        Configured AuthorSearchService instance.
    """
    search = config.search
    return AuthorSearchService(
        backend=build_backend(config.backend.kind, config=config),
        fields=search.fields,
        fuzzy=search.fuzzy,
        default_limit=search.default_limit,
        max_limit=search.max_limit,
        max_skip=search.max_skip,
        default_autocomplete=search.autocomplete,
    )


__all__ = [
    "AuthorSearchBackend",
    "AuthorSearchService",
    "assemble_envelope",
    "create_search_service",
]
