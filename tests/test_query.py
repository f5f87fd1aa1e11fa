import pytest

from errors import UsageError
from query import build_search_query


def test_build_search_query_category_and_query() -> None:
    assert build_search_query("cs.CL", "graphrag") == "cat:cs.CL AND graphrag"


def test_build_search_query_category_only() -> None:
    assert build_search_query(category="cs.AI") == "cat:cs.AI"


def test_build_search_query_query_only_is_passed_through_unchanged() -> None:
    assert build_search_query(query='ti:"machine learning"') == 'ti:"machine learning"'


@pytest.mark.parametrize("category, query", [(None, None), ("", ""), ("  ", None)])
def test_build_search_query_requires_category_or_query(category, query) -> None:
    with pytest.raises(UsageError):
        build_search_query(category, query)
