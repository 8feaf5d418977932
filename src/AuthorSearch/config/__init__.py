from __future__ import annotations

"""Public configuration API for AuthorSearch."""

from AuthorSearch.config.app import (
    DEFAULT_CONFIG_PATH,
    AppConfig,
    load_config,
    load_config_with_defaults,
    parse_config_dict,
)
from AuthorSearch.config.backend import BackendConfig
from AuthorSearch.config.runtime import RuntimeConfig
from AuthorSearch.config.search import SearchConfig

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "RuntimeConfig",
    "SearchConfig",
    "BackendConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "parse_config_dict",
]
