"""Search domain configuration: searched fields, paging bounds, fuzziness."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from AuthorSearch.config.common import (
    expect_bool,
    expect_int,
    expect_str_tuple,
    get_section,
    read_value,
)
from AuthorSearch.core.compiler import SEARCH_FIELDS
from AuthorSearch.core.params import DEFAULT_LIMIT, MAX_LIMIT, MAX_SKIP
from AuthorSearch.core.query import FuzzyOptions

# Atlas Search rejects larger edit distances.
_MAX_FUZZY_EDITS = 2


@dataclass(frozen=True, slots=True)
class SearchConfig:
    """Store validated search behavior and paging bounds."""

    fields: tuple[str, ...]
    exclude_fields: tuple[str, ...]
    default_limit: int
    max_limit: int
    max_skip: int
    autocomplete: bool
    fuzzy: FuzzyOptions


def load_search(raw: Mapping[str, Any]) -> SearchConfig:
    """Load search domain config from raw mapping.

    Every key is optional and falls back to the built-in defaults.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed search configuration.

    Raises:
        TypeError: If config types are invalid.
    """
    section = get_section(raw, "search", required=False)
    fuzzy_section = get_section(section, "search.fuzzy", required=False)
    return SearchConfig(
        fields=read_value(section, "search.fields", expect_str_tuple, list(SEARCH_FIELDS)),
        exclude_fields=read_value(section, "search.exclude_fields", expect_str_tuple, ["__v", "aka"]),
        default_limit=read_value(section, "search.default_limit", expect_int, DEFAULT_LIMIT),
        max_limit=read_value(section, "search.max_limit", expect_int, MAX_LIMIT),
        max_skip=read_value(section, "search.max_skip", expect_int, MAX_SKIP),
        autocomplete=read_value(section, "search.autocomplete", expect_bool, True),
        fuzzy=FuzzyOptions(
            max_edits=read_value(fuzzy_section, "search.fuzzy.max_edits", expect_int, 1),
            prefix_length=read_value(fuzzy_section, "search.fuzzy.prefix_length", expect_int, 2),
        ),
    )


def check_search(config: SearchConfig) -> None:
    """Validate search domain constraints.

    Raises:
        ValueError: If values violate search constraints.
    """
    if not config.fields:
        raise ValueError("search.fields must include at least one field")
    if config.max_limit <= 0:
        raise ValueError("search.max_limit must be positive")
    if not 0 < config.default_limit <= config.max_limit:
        raise ValueError("search.default_limit must be positive and <= search.max_limit")
    if config.max_skip < 0:
        raise ValueError("search.max_skip must be >= 0")
    if not 0 <= config.fuzzy.max_edits <= _MAX_FUZZY_EDITS:
        raise ValueError(f"search.fuzzy.max_edits must be between 0 and {_MAX_FUZZY_EDITS}")
    if config.fuzzy.prefix_length < 0:
        raise ValueError("search.fuzzy.prefix_length must be >= 0")
