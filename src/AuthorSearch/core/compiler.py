"""Author name query compiler.

Compiles a normalized, free-text name query into a ``CompoundClause``.

Rules
- The query is split into words (alphanumeric runs, punctuation and
  whitespace separate words): "henry f. beecher" -> henry / f / beecher.
- Autocomplete assumes the user types left to right, so every word except
  the last one is complete. The last word becomes a prefix clause and is
  left out of the fuzzy terms.
- Complete words form a single fuzzy clause. At least one of them has to
  match, in any order, so middle names, initials, prefixes and suffixes are
  never required.
- All clauses are ``must`` clauses; ``should`` is left empty.
"""

from __future__ import annotations

import re
from typing import Sequence

from AuthorSearch.core.query import CompoundClause, FuzzyOptions, TextClause

SEARCH_FIELDS: tuple[str, ...] = ("name", "aka")

_RE_WORD = re.compile(r"[^\W_]+")


def tokenize(text: str) -> list[str]:
    """Split text into lower-case words, in typed order."""
    return [word.lower() for word in _RE_WORD.findall(text)]


def compile_author_query(
    query: str,
    *,
    autocomplete: bool,
    fields: Sequence[str] = SEARCH_FIELDS,
    fuzzy: FuzzyOptions | None = None,
) -> CompoundClause | None:
    """Compile a name query into must/should clauses.

    Args:
        query: Normalized (lower-cased) query text.
        autocomplete: Prefix-match the last word instead of fuzzy matching it.
        fields: Document fields searched by every clause.
        fuzzy: Edit tolerance for complete words.

    Returns:
        The compiled clause, or None when the query contains no words.
    """
    words = tokenize(query)
    if not words:
        return None

    paths = tuple(fields)
    must: list[TextClause] = []

    if autocomplete:
        must.append(TextClause(fields=paths, terms=words[-1], prefix_match=True))
        search_terms = words[:-1]
    else:
        search_terms = words

    if search_terms:
        must.append(
            TextClause(
                fields=paths,
                terms=tuple(search_terms),
                fuzzy=fuzzy if fuzzy is not None else FuzzyOptions(),
            )
        )

    return CompoundClause(must=tuple(must), should=())
