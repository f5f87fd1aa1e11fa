"""CLI entrypoint for downloading arXiv papers by category or search query."""

from __future__ import annotations

import argparse
import logging
import os

from dotenv import load_dotenv

from arxiv_feed import fetch_papers
from errors import ArxivCliError, UsageError
from file_sink import download_papers
from models import OutputPaths, PersistOptions, RunSummary
from query import build_search_query

__version__ = "1.0.0"

DEFAULT_LIMIT = 5

LOGGER = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="arxiv-cli",
        description=(
            "Download the most recent papers belonging to an arXiv category "
            "and/or matching a search query."
        ),
    )
    parser.add_argument("-c", "--category", help="The category of the papers (e.g. cs.AI, cs.CL)")
    parser.add_argument("-q", "--query", help='Search query (e.g. "graphrag", "machine learning")')
    parser.add_argument(
        "-l",
        "--limit",
        type=_positive_int,
        default=DEFAULT_LIMIT,
        help=f"The maximum number of papers to fetch (default: {DEFAULT_LIMIT})",
    )
    parser.add_argument("-p", "--pdf", action="store_true", help="Fetch and save the PDF of each paper")
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Save the summary of each paper to a .txt file",
    )
    parser.add_argument(
        "--no-metadata",
        action="store_true",
        help="Disable saving the metadata of the papers to metadata.jsonl",
    )
    parser.add_argument(
        "--output-dir",
        default=os.getenv("ARXIV_CLI_OUTPUT_DIR", "."),
        help="Directory that receives metadata.jsonl, pdfs/ and texts/ (default: current directory)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(
    search_query: str,
    limit: int,
    options: PersistOptions,
    paths: OutputPaths,
) -> RunSummary:
    """Fetch one page of results and persist it."""
    if not options.any_enabled:
        logging.warning("Metadata, PDF and summary output are all disabled; nothing will be saved")

    papers = fetch_papers(search_query, limit)
    logging.info("Fetched %s papers from arXiv", len(papers))
    return download_papers(papers, options, paths)


def main(argv: list[str] | None = None) -> None:
    """Initialize config and execute the download."""
    load_dotenv()
    parser = build_parser()
    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else os.getenv("ARXIV_CLI_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(message)s")

    try:
        search_query = build_search_query(args.category, args.query)
    except UsageError as exc:
        parser.error(str(exc))

    options = PersistOptions(
        save_metadata=not args.no_metadata,
        save_pdf=args.pdf,
        save_summary=args.summary,
    )
    paths = OutputPaths.under(args.output_dir)

    try:
        run(search_query, args.limit, options, paths)
    except ArxivCliError as exc:
        LOGGER.error("%s", exc)
        raise SystemExit(1) from exc


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}") from exc
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


if __name__ == "__main__":
    main()
