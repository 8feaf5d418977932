"""Backend registry and builders for search backends."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from AuthorSearch.config import AppConfig
    from AuthorSearch.services.search import AuthorSearchBackend

BackendBuilder = Callable[["AppConfig"], "AuthorSearchBackend"]


def build_backend(backend_name: str, *, config: AppConfig) -> AuthorSearchBackend:
    """Build a search backend from its registered name.

    Args:
        backend_name: Backend identifier from ``backend.kind``.
        config: Parsed application configuration.

    Returns:
        AuthorSearchBackend: Initialized backend for the given name.

    Raises:
        ValueError: If ``backend_name`` is not registered.
    """
    builder = _backend_builders().get(backend_name)
    if builder is None:
        raise ValueError(f"Unsupported backend in config.backend.kind: {backend_name}")
    return builder(config)


def supported_backend_names() -> tuple[str, ...]:
    """Return all backend names that can be built by the registry."""
    return tuple(_backend_builders().keys())


def _backend_builders() -> dict[str, BackendBuilder]:
    return {
        "atlas": _build_atlas_backend,
    }


def _build_atlas_backend(config: AppConfig) -> AuthorSearchBackend:
    """Build the Atlas Search backend."""
    from AuthorSearch.backends.atlas.backend import AtlasSearchBackend
    from AuthorSearch.backends.atlas.client import AtlasDataApiClient

    backend_config = config.backend
    if not backend_config.api_key:
        raise ValueError(
            f"Atlas backend selected but {backend_config.api_key_env} environment variable not set. "
            "Set it in your .env file or shell environment."
        )
    return AtlasSearchBackend(
        client=AtlasDataApiClient(
            base_url=backend_config.base_url,
            api_key=backend_config.api_key,
            data_source=backend_config.data_source,
            database=backend_config.database,
            collection=backend_config.collection,
            timeout=backend_config.timeout,
            max_attempts=backend_config.max_attempts,
        ),
        index=backend_config.index,
        stage=backend_config.stage,
        exclude_fields=config.search.exclude_fields,
    )
