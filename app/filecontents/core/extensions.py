"""Extension filtering.

Decides whether a file path satisfies a set of extension filters.
Filters are lower-case extensions without the leading dot; an empty
set, or one containing the ``*`` wildcard, matches every path.
"""

from collections.abc import Iterable
from pathlib import PurePath

WILDCARD = "*"


def extension_of(path: str | PurePath) -> str:
    """Return the lower-cased extension of a path without the dot.

    The extension is whatever follows the last ``.`` in the file name, so
    ``.gitignore`` yields ``gitignore``.

    Args:
        path: File path.

    Returns:
        The extension, or an empty string if the name has no dot.
    """
    name = PurePath(path).name
    _, dot, ext = name.rpartition(".")
    if not dot:
        return ""
    return ext.lower()


def normalize_extensions(raw: Iterable[str]) -> tuple[str, ...]:
    """Build the effective filter set from user-supplied extensions.

    Accepts ``cs``, ``.cs``, ``*.cs`` and ``CS`` alike. An entry made only
    of wildcards becomes the universal ``*`` marker.

    Args:
        raw: Extensions as typed by the user.

    Returns:
        Ordered, de-duplicated filters.
    """
    filters: list[str] = []
    for entry in raw:
        value = entry.strip().lower()
        if not value:
            continue
        stripped = value.replace(WILDCARD, "").lstrip(".")
        if not stripped:
            if WILDCARD not in value:
                continue
            stripped = WILDCARD
        if stripped not in filters:
            filters.append(stripped)
    return tuple(filters)


def matches_all(filters: Iterable[str]) -> bool:
    """Check if a filter set accepts every path."""
    filters = tuple(filters)
    return not filters or WILDCARD in filters


def matches(path: str | PurePath, filters: Iterable[str]) -> bool:
    """Check if a path's extension satisfies the filter set.

    Args:
        path: File path to check.
        filters: Normalized extension filters.

    Returns:
        True if the filter set is empty or wildcard, or the extension
        equals one of the filters (case-insensitive).
    """
    filters = tuple(filters)
    if matches_all(filters):
        return True
    ext = extension_of(path)
    if not ext:
        return False
    return ext in {f.lower() for f in filters}


def glob_patterns(filters: Iterable[str]) -> list[str]:
    """Build directory glob patterns for a filter set.

    Returns:
        ``["*"]`` for an empty or wildcard set, otherwise ``*.<ext>`` per filter.
    """
    filters = tuple(filters)
    if matches_all(filters):
        return [WILDCARD]
    return [f"*.{ext}" for ext in filters]
