"""Exception types raised by the arXiv download pipeline."""

from __future__ import annotations


class ArxivCliError(RuntimeError):
    """Base class for every fatal error surfaced by the CLI."""


class UsageError(ArxivCliError):
    """Invalid command-line input, reported before any I/O happens."""


class FetchError(ArxivCliError):
    """Transport failure or unparsable response from a remote endpoint."""


class PersistError(ArxivCliError):
    """A directory or file could not be created or written."""
