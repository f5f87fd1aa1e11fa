"""Filesystem-safe filenames derived from paper titles."""

from __future__ import annotations

# Characters rejected by at least one mainstream filesystem (Windows is the strictest).
_RESERVED_CHARS: frozenset[str] = frozenset('<>:"/\\|?*')

MAX_FILENAME_LENGTH = 200


def sanitize_filename(name: str) -> str:
    """Turn an arbitrary title into a string usable as a single path component.

    Reserved characters become ``_``, surrounding whitespace and trailing dots
    are stripped, and the result is capped at ``MAX_FILENAME_LENGTH`` characters.
    """
    sanitized = _trim("".join("_" if ch in _RESERVED_CHARS else ch for ch in name))
    if len(sanitized) > MAX_FILENAME_LENGTH:
        sanitized = _trim(sanitized[:MAX_FILENAME_LENGTH])
    return sanitized


def _trim(value: str) -> str:
    # "Title ." must not end up as "Title ", so alternate until both are gone.
    value = value.strip()
    while value.endswith("."):
        value = value[:-1].rstrip()
    return value
