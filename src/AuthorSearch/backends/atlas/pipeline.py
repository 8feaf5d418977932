"""Atlas Search aggregation builders.

Translates a ``CompoundClause`` into MongoDB aggregation pipelines that run
an Atlas Search ``compound`` query over the authors collection.

Mapping
- prefix clause -> ``term`` with ``prefix: true``
- fuzzy clause  -> ``term`` with ``fuzzy: {maxEdits, prefixLength}``
- must / should -> ``compound.must`` / ``compound.should``

Atlas returns search results ordered by relevance score, so the page pipeline
adds no explicit sort stage.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from AuthorSearch.core.query import CompoundClause, TextClause

COUNT_FIELD = "totalCount"
SEARCH_STAGES = ("$search", "$searchBeta")


def compile_term(clause: TextClause) -> dict[str, Any]:
    """Compile one clause into an Atlas ``term`` operator."""
    query: str | list[str] = clause.terms if isinstance(clause.terms, str) else list(clause.terms)
    operator: dict[str, Any] = {"path": list(clause.fields), "query": query}
    if clause.prefix_match:
        operator["prefix"] = True
    if clause.fuzzy is not None:
        operator["fuzzy"] = clause.fuzzy.to_dict()
    return {"term": operator}


def compile_search_stage(clause: CompoundClause, *, index: str = "", stage: str = "$search") -> dict[str, Any]:
    """Compile a compound clause into a single search stage.

    Args:
        clause: Compiled author query.
        index: Atlas Search index name; omitted when empty.
        stage: Search stage operator name.

    Returns:
        A pipeline stage mapping.
    """
    if stage not in SEARCH_STAGES:
        raise ValueError(f"Unsupported search stage: {stage}")
    body: dict[str, Any] = {}
    if index:
        body["index"] = index
    body["compound"] = {
        "should": [compile_term(item) for item in clause.should],
        "must": [compile_term(item) for item in clause.must],
    }
    return {stage: body}


def build_page_pipeline(
    clause: CompoundClause,
    *,
    skip: int,
    limit: int,
    exclude_fields: Sequence[str] = (),
    index: str = "",
    stage: str = "$search",
) -> list[dict[str, Any]]:
    """Build the pipeline returning one page of matching documents."""
    pipeline = [compile_search_stage(clause, index=index, stage=stage)]
    if exclude_fields:
        pipeline.append({"$project": {field: 0 for field in exclude_fields}})
    pipeline.append({"$skip": skip})
    pipeline.append({"$limit": limit})
    return pipeline


def build_count_pipeline(clause: CompoundClause, *, index: str = "", stage: str = "$search") -> list[dict[str, Any]]:
    """Build the pipeline counting every matching document."""
    return [
        compile_search_stage(clause, index=index, stage=stage),
        {"$count": COUNT_FIELD},
    ]


def read_total_count(documents: Sequence[Mapping[str, Any]]) -> int:
    """Extract the total from a count pipeline result.

    ``$count`` emits no document at all when nothing matches.
    """
    if not documents:
        return 0
    value = documents[0].get(COUNT_FIELD, 0)
    return int(value) if isinstance(value, (int, float)) and not isinstance(value, bool) else 0
