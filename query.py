"""Search-query construction for the arXiv API."""

from __future__ import annotations

from errors import UsageError


def build_search_query(category: str | None = None, query: str | None = None) -> str:
    """Combine an optional category and free-text query into one arXiv search string.

    - both present   -> ``cat:<category> AND <query>``
    - category only  -> ``cat:<category>``
    - query only     -> ``<query>`` unchanged

    Raises:
        UsageError: when neither a category nor a query is supplied.
    """
    has_category = bool(category and category.strip())
    has_query = bool(query and query.strip())

    if has_category and has_query:
        return f"cat:{category} AND {query}"
    if has_category:
        return f"cat:{category}"
    if has_query:
        return query
    raise UsageError("Either --category or --query must be provided")
