"""arXiv search API ingestion helpers."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

import arxiv
import requests

from errors import FetchError
from models import PaperRecord

# The export API serves at most this many entries per page.
_MAX_PAGE_SIZE = 2000
_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

LOGGER = logging.getLogger(__name__)


def fetch_papers(search_query: str, limit: int) -> list[PaperRecord]:
    """Run one arXiv search and return the newest submissions first.

    The request starts at offset 0 and is sized so that ``limit`` results fit
    in a single page. Failures are not retried.

    Raises:
        FetchError: on transport errors, non-200 responses, or an unusable feed.
    """
    search = arxiv.Search(
        query=search_query,
        max_results=limit,
        sort_by=arxiv.SortCriterion.SubmittedDate,
        sort_order=arxiv.SortOrder.Descending,
    )
    client = arxiv.Client(page_size=max(1, min(limit, _MAX_PAGE_SIZE)), num_retries=0)

    LOGGER.info("arXiv fetch: query=%r limit=%s", search_query, limit)
    try:
        papers = [_to_record(result) for result in client.results(search, offset=0)]
    except (arxiv.ArxivError, requests.RequestException) as exc:
        raise FetchError(f"arXiv API request failed for query {search_query!r}: {exc}") from exc

    LOGGER.info("arXiv fetch: returned=%s", len(papers))
    return papers


def _to_record(result: arxiv.Result) -> PaperRecord:
    """Convert an ``arxiv.Result`` into the pipeline's record type."""
    html_url = result.entry_id
    pdf_url = result.pdf_url or ""
    for link in result.links:
        if link.rel == "alternate" and link.content_type == "text/html":
            html_url = link.href
        elif not pdf_url and link.content_type == "application/pdf":
            pdf_url = link.href

    return PaperRecord(
        paper_id=result.entry_id,
        updated=_format_timestamp(result.updated),
        published=_format_timestamp(result.published),
        title=(result.title or "").strip(),
        summary=(result.summary or "").strip(),
        authors=[author.name for author in result.authors],
        primary_category=result.primary_category or "",
        categories=list(result.categories),
        pdf_url=pdf_url,
        html_url=html_url,
        comment=result.comment or None,
    )


def _format_timestamp(value: datetime) -> str:
    # Match the Atom feed's own representation, e.g. 2024-05-01T17:59:59Z.
    if value.tzinfo is not None:
        value = value.astimezone(UTC)
    return value.strftime(_TIMESTAMP_FORMAT)
