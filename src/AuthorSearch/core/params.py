"""Request parameter normalization.

Turns raw, string-typed request parameters into a validated ``SearchRequest``.
Nothing here raises on bad input: unparseable or out-of-range values are
clamped or replaced by their defaults.
"""

from __future__ import annotations

import math
import sys
from typing import Any, Mapping

from AuthorSearch.core.models import SearchRequest
from AuthorSearch.utils.log import log

DEFAULT_LIMIT = 20
MAX_LIMIT = 50
MAX_SKIP = 1000

_TRUE_STRINGS = frozenset({"true", "1", "yes", "y", "on", "t"})
_FALSE_STRINGS = frozenset({"false", "0", "no", "n", "off", "f", ""})


def normalize_search_params(
    params: Mapping[str, Any],
    *,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = MAX_LIMIT,
    max_skip: int = MAX_SKIP,
    default_autocomplete: bool = True,
) -> SearchRequest | None:
    """Build a ``SearchRequest`` from raw request parameters.

    Args:
        params: Raw parameters (``query``, ``autocomplete``, ``limit``,
            ``skip``), all optional.
        default_limit: Page size used when ``limit`` is absent, invalid or 0.
        max_limit: Upper bound for ``limit``.
        max_skip: Upper bound for ``skip``.
        default_autocomplete: Value used when ``autocomplete`` is absent or
            not recognized.

    Returns:
        The normalized request, or None when the query is empty.
    """
    raw_query = params.get("query")
    raw_query = "" if raw_query is None else str(raw_query)
    query = raw_query.lower()
    if not query:
        return None

    limit = _clamp(parse_int(params.get("limit")), 0, max_limit) or default_limit
    skip = _clamp(parse_int(params.get("skip")), 0, max_skip) or 0

    # A trailing space means the last word was finished.
    autocomplete = parse_bool(params.get("autocomplete"), default=default_autocomplete)
    autocomplete = autocomplete and not raw_query.endswith(" ")

    request = SearchRequest(
        raw_query=raw_query,
        query=query,
        autocomplete=autocomplete,
        limit=limit,
        skip=skip,
    )
    log.debug(
        "Normalized search params: query=%r autocomplete=%s limit=%d skip=%d",
        request.query,
        request.autocomplete,
        request.limit,
        request.skip,
    )
    return request


def parse_int(value: Any) -> int | None:
    """Parse an integer-like value; None when absent, NaN or non-numeric.

    Infinite or overly long numbers map to ``±sys.maxsize`` so that callers
    clamp them to their bounds.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value):
            return None
        if math.isinf(value):
            return sys.maxsize if value > 0 else -sys.maxsize
        return int(value)
    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return None
    return parse_int(number)


def parse_bool(value: Any, *, default: bool) -> bool:
    """Parse a boolean-like value.

    Accepts bools, numbers (non-zero is True), and the usual textual forms
    (``true/false``, ``1/0``, ``yes/no``, ``y/n``, ``on/off``, ``t/f``) in any
    case. Unrecognized values fall back to ``default``.
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    text = str(value).strip().lower()
    if text in _TRUE_STRINGS:
        return True
    if text in _FALSE_STRINGS:
        return False
    return default


def _clamp(value: int | None, lower: int, upper: int) -> int | None:
    if value is None:
        return None
    return max(lower, min(value, upper))
