"""Stable, locale-agnostic ordering of listing entries."""

from __future__ import annotations

import os
from collections.abc import Iterable

from ..config import SortKey
from .types import FileEntry


def name_sort_key(entry: FileEntry) -> bytes:
    """Byte-wise key: compare raw filesystem bytes, never the locale."""
    return os.fsencode(entry.name)


def sort_entries(
    entries: Iterable[FileEntry],
    *,
    reverse: bool = False,
    key: SortKey = SortKey.NAME,
) -> list[FileEntry]:
    """Return ``entries`` ordered by ``key``; ``reverse`` flips the result.

    Size and time orders put the largest/newest first and break ties by name.
    """
    if key is SortKey.SIZE:
        ordered = sorted(entries, key=lambda entry: (-entry.size, name_sort_key(entry)))
    elif key is SortKey.TIME:
        ordered = sorted(entries, key=lambda entry: (-entry.mtime_ns, name_sort_key(entry)))
    else:
        ordered = sorted(entries, key=name_sort_key)
    if reverse:
        ordered.reverse()
    return ordered


__all__ = ["name_sort_key", "sort_entries"]
