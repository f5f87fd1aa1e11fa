"""Local file sink: metadata JSONL, PDF downloads and summary text files."""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterable
from pathlib import Path

import requests

from errors import FetchError, PersistError
from filenames import sanitize_filename
from models import OutputPaths, PaperRecord, PersistOptions, RunSummary

DEFAULT_PDF_TIMEOUT_SECONDS = 30.0

LOGGER = logging.getLogger(__name__)


def download_papers(
    papers: Iterable[PaperRecord],
    options: PersistOptions,
    paths: OutputPaths,
) -> RunSummary:
    """Persist every paper according to ``options``, one paper at a time.

    Metadata lines are buffered in memory and written to ``paths.metadata_file``
    in a single write after the loop; the file is left untouched when no line
    was produced. PDFs and summaries are written as each paper is visited and
    overwrite any existing file of the same name.

    The first network or filesystem error aborts the whole run.

    Args:
        papers:  Records in the order returned by the API.
        options: Which of metadata / PDF / summary output to produce.
        paths:   Where each kind of output goes.

    Raises:
        FetchError:   a PDF could not be downloaded.
        PersistError: a directory or file could not be written.
    """
    metadata_lines: list[str] = []
    fetched = 0
    pdfs = 0
    summaries = 0

    for paper in papers:
        fetched += 1

        if options.save_metadata:
            metadata_lines.append(json.dumps(paper.to_metadata(), ensure_ascii=False))

        if options.save_pdf:
            _ensure_dir(paths.pdf_dir)
            target = paths.pdf_dir / _base_name(paper)
            fetch_pdf(paper, target)
            pdfs += 1

        if options.save_summary:
            _ensure_dir(paths.text_dir)
            target = paths.text_dir / f"{_base_name(paper)}.txt"
            write_summary(paper, target)
            summaries += 1

    if metadata_lines:
        write_metadata(metadata_lines, paths.metadata_file)

    summary = RunSummary(
        fetched=fetched,
        metadata_lines=len(metadata_lines),
        pdfs=pdfs,
        summaries=summaries,
    )
    LOGGER.info(
        "Persisted papers: fetched=%s metadata_lines=%s pdfs=%s summaries=%s",
        summary.fetched,
        summary.metadata_lines,
        summary.pdfs,
        summary.summaries,
    )
    return summary


def fetch_pdf(paper: PaperRecord, out_path: Path) -> Path:
    """Download ``paper.pdf_url`` to ``out_path`` (``.pdf`` appended if missing)."""
    if not out_path.name.endswith(".pdf"):
        out_path = out_path.with_name(f"{out_path.name}.pdf")

    timeout = float(os.getenv("ARXIV_CLI_PDF_TIMEOUT", DEFAULT_PDF_TIMEOUT_SECONDS))
    try:
        response = requests.get(paper.pdf_url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(f"Failed to fetch PDF for {paper.title!r}: {exc}") from exc

    try:
        out_path.write_bytes(response.content)
    except OSError as exc:
        raise PersistError(f"Failed to write PDF {out_path}: {exc}") from exc

    LOGGER.info("Saved PDF for paper_id=%s to %s", paper.paper_id, out_path)
    return out_path


def write_summary(paper: PaperRecord, out_path: Path) -> Path:
    """Write the paper's raw summary text to ``out_path`` (``.txt`` appended if missing)."""
    if not out_path.name.endswith(".txt"):
        out_path = out_path.with_name(f"{out_path.name}.txt")

    try:
        # newline="" keeps the summary byte-for-byte, including on Windows.
        with out_path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(paper.summary)
    except OSError as exc:
        raise PersistError(f"Failed to write summary {out_path}: {exc}") from exc

    LOGGER.info("Saved summary for paper_id=%s to %s", paper.paper_id, out_path)
    return out_path


def write_metadata(lines: list[str], out_path: Path) -> Path:
    """Replace ``out_path`` with one JSON document per line."""
    try:
        with out_path.open("w", encoding="utf-8", newline="\n") as fh:
            fh.write("\n".join(lines) + "\n")
    except OSError as exc:
        raise PersistError(f"Failed to write metadata file {out_path}: {exc}") from exc

    LOGGER.info("Wrote %s metadata lines to %s", len(lines), out_path)
    return out_path


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise PersistError(f"Failed to create directory {path}: {exc}") from exc


def _base_name(paper: PaperRecord) -> str:
    """Sanitized title, or the short arXiv id when the title sanitizes to nothing."""
    name = sanitize_filename(paper.title)
    if not name:
        name = sanitize_filename(paper.paper_id.rstrip("/").rsplit("/", 1)[-1])
    return name
