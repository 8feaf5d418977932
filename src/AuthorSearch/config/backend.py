"""Backend domain configuration for the external search engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from AuthorSearch.backends.atlas.pipeline import SEARCH_STAGES
from AuthorSearch.backends.registry import supported_backend_names
from AuthorSearch.config.common import (
    expect_float,
    expect_int,
    expect_str,
    get_section,
    read_value,
)

_ALLOWED_KINDS = frozenset(supported_backend_names())


@dataclass(frozen=True, slots=True)
class BackendConfig:
    """Store validated connection settings for the search backend."""

    kind: str
    base_url: str
    api_key_env: str
    api_key: str
    data_source: str
    database: str
    collection: str
    index: str
    stage: str
    timeout: float
    max_attempts: int


def load_backend(raw: Mapping[str, Any]) -> BackendConfig:
    """Load backend domain config from raw mapping.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed backend configuration. The API key is read from the
        environment variable named by ``backend.api_key_env``.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "backend", required=True)
    api_key_env = read_value(section, "backend.api_key_env", expect_str, "ATLAS_DATA_API_KEY")
    return BackendConfig(
        kind=read_value(section, "backend.kind", expect_str, "atlas").strip().lower(),
        base_url=read_value(section, "backend.base_url", expect_str),
        api_key_env=api_key_env,
        api_key=_load_api_key_from_env(api_key_env),
        data_source=read_value(section, "backend.data_source", expect_str),
        database=read_value(section, "backend.database", expect_str),
        collection=read_value(section, "backend.collection", expect_str, "authors"),
        index=read_value(section, "backend.index", expect_str, "default"),
        stage=read_value(section, "backend.stage", expect_str, "$search"),
        timeout=read_value(section, "backend.timeout", expect_float, 30),
        max_attempts=read_value(section, "backend.max_attempts", expect_int, 1),
    )


def check_backend(config: BackendConfig) -> None:
    """Validate backend domain constraints.

    The API key itself is checked when a backend is built, so that config
    files can be parsed and validated without credentials.

    Raises:
        ValueError: If values violate backend constraints.
    """
    if config.kind not in _ALLOWED_KINDS:
        raise ValueError(f"backend.kind must be one of {sorted(_ALLOWED_KINDS)}")
    for value, config_key in (
        (config.base_url, "backend.base_url"),
        (config.api_key_env, "backend.api_key_env"),
        (config.data_source, "backend.data_source"),
        (config.database, "backend.database"),
        (config.collection, "backend.collection"),
    ):
        if not value.strip():
            raise ValueError(f"{config_key} must not be empty")
    if config.stage not in SEARCH_STAGES:
        raise ValueError(f"backend.stage must be one of {list(SEARCH_STAGES)}")
    if config.timeout <= 0:
        raise ValueError("backend.timeout must be positive")
    if config.max_attempts < 1:
        raise ValueError("backend.max_attempts must be >= 1")


def _load_api_key_from_env(api_key_env: str) -> str:
    """Load API key from environment variable."""
    return os.getenv(api_key_env, "").strip()
