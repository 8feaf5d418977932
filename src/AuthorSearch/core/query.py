from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence


@dataclass(frozen=True, slots=True)
class FuzzyOptions:
    """Edit tolerance for whole-word matching.

    Attributes:
        max_edits: Maximum number of single-character edits per term.
        prefix_length: Number of leading characters that must match exactly.
    """

    max_edits: int = 1
    prefix_length: int = 2

    def to_dict(self) -> dict[str, int]:
        return {"maxEdits": self.max_edits, "prefixLength": self.prefix_length}


@dataclass(frozen=True, slots=True)
class TextClause:
    """One match condition over a set of document fields.

    A clause takes one of two forms:

    - prefix form: ``terms`` is a single word and ``prefix_match`` is True; a
      document matches when any word of any field starts with it.
    - fuzzy form: ``terms`` is a list of words and ``fuzzy`` is set; a
      document matches when at least one of the words matches a field word
      within the edit tolerance.

    How a clause maps to a concrete engine is handled by the backend compiler.
    """

    fields: tuple[str, ...]
    terms: str | tuple[str, ...]
    prefix_match: bool = False
    fuzzy: FuzzyOptions | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"fields": list(self.fields)}
        if isinstance(self.terms, str):
            data["terms"] = self.terms
        else:
            data["terms"] = list(self.terms)
        if self.prefix_match:
            data["prefixMatch"] = True
        if self.fuzzy is not None:
            data["fuzzy"] = self.fuzzy.to_dict()
        return data


@dataclass(frozen=True, slots=True)
class CompoundClause:
    """Compiled match request passed to a search backend.

    Every ``must`` clause has to be satisfied by a matching document. ``should``
    clauses only raise the relevance score and never gate inclusion.
    """

    must: Sequence[TextClause] = ()
    should: Sequence[TextClause] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, list[dict[str, Any]]]:
        return {
            "must": [clause.to_dict() for clause in self.must],
            "should": [clause.to_dict() for clause in self.should],
        }
