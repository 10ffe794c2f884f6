"""Domain model for directory listings.

This package contains the non-presentation listing primitives:
- entry/listing datatypes and the closed file-type set
- classification of type, indicator and permission triads
- directory scanning with ignore policies
- byte-wise sorting and column-width accumulation
"""

from __future__ import annotations

from .classify import INDICATORS, classify, file_type_for_mode, indicator_for, permissions_for_mode
from .collect import collect_entries, collect_target, should_ignore
from .errors import DirectoryOpenError, EntryStatError, ListingError
from .sorting import name_sort_key, sort_entries
from .types import ColumnWidths, DirectoryListing, FileEntry, FileType, Permissions
from .widths import WidthTracker, count_digits, track_widths

__all__ = [
    "FileType",
    "Permissions",
    "FileEntry",
    "ColumnWidths",
    "DirectoryListing",
    "INDICATORS",
    "classify",
    "file_type_for_mode",
    "indicator_for",
    "permissions_for_mode",
    "should_ignore",
    "collect_entries",
    "collect_target",
    "ListingError",
    "DirectoryOpenError",
    "EntryStatError",
    "name_sort_key",
    "sort_entries",
    "WidthTracker",
    "count_digits",
    "track_widths",
]
