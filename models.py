"""Shared typed models for the pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

# arXiv feeds occasionally double the scheme suffix on links.
_BROKEN_SCHEME = "httpss"


def normalize_url(url: str) -> str:
    """Repair the ``httpss://`` defect seen in some arXiv links."""
    return url.replace(_BROKEN_SCHEME, "https")


@dataclass(frozen=True, slots=True)
class PaperRecord:
    """One paper as returned by the arXiv API, with URLs already normalized."""

    paper_id: str
    updated: str
    published: str
    title: str
    summary: str
    authors: list[str]
    primary_category: str
    categories: list[str]
    pdf_url: str
    html_url: str
    comment: str | None = None

    def __post_init__(self) -> None:
        # Frozen dataclass: bypass __setattr__ to store the repaired links.
        object.__setattr__(self, "pdf_url", normalize_url(self.pdf_url))
        object.__setattr__(self, "html_url", normalize_url(self.html_url))

    def to_metadata(self) -> dict[str, Any]:
        """Return the JSONL view of the record.

        The summary is deliberately left out; it is written to its own text
        file so that each metadata line stays compact.
        """
        return {
            "id": self.paper_id,
            "updated": self.updated,
            "published": self.published,
            "title": self.title,
            "authors": list(self.authors),
            "primary_category": self.primary_category,
            "categories": list(self.categories),
            "pdf_url": self.pdf_url,
            "html_url": self.html_url,
            "comment": self.comment,
        }


@dataclass(frozen=True, slots=True)
class PersistOptions:
    """Which of the three per-paper side effects to perform."""

    save_metadata: bool = True
    save_pdf: bool = False
    save_summary: bool = False

    @property
    def any_enabled(self) -> bool:
        return self.save_metadata or self.save_pdf or self.save_summary


@dataclass(frozen=True, slots=True)
class OutputPaths:
    """Locations written by a run."""

    metadata_file: Path
    pdf_dir: Path
    text_dir: Path

    @classmethod
    def under(cls, base_dir: str | Path) -> OutputPaths:
        """Build the default layout (metadata.jsonl, pdfs/, texts/) below base_dir."""
        base = Path(base_dir)
        return cls(
            metadata_file=base / "metadata.jsonl",
            pdf_dir=base / "pdfs",
            text_dir=base / "texts",
        )


@dataclass(frozen=True, slots=True)
class RunSummary:
    """Counts of what a run wrote to disk."""

    fetched: int
    metadata_lines: int
    pdfs: int
    summaries: int
