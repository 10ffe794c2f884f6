"""Column-width accumulation over one directory's sorted entries."""

from __future__ import annotations

from collections.abc import Iterable

from ..formatting import human_readable_size
from .types import ColumnWidths, FileEntry

HUMAN_READABLE_SIZE_WIDTH = 7


def count_digits(number: int) -> int:
    """Return decimal digit count of a non-negative integer (``0`` has one)."""
    return len(str(max(0, int(number))))


class WidthTracker:
    """Streaming maxima of name/link/user/group/size field lengths.

    Widths only grow while entries are observed; ``finalize`` returns the
    frozen ``ColumnWidths`` used by every renderer for the directory.
    """

    def __init__(self, human_readable: bool = False) -> None:
        self.human_readable = human_readable
        self.name = 0
        self.link_count = 0
        self.user = 0
        self.group = 0
        self.size = HUMAN_READABLE_SIZE_WIDTH if human_readable else 0

    def observe(self, entry: FileEntry) -> None:
        self.name = max(self.name, entry.name_display_length)
        self.link_count = max(self.link_count, count_digits(entry.link_count))
        self.user = max(self.user, len(entry.owner))
        self.group = max(self.group, len(entry.group))
        if self.human_readable:
            self.size = max(self.size, len(human_readable_size(entry.size)))
        else:
            self.size = max(self.size, count_digits(entry.size))

    def finalize(self) -> ColumnWidths:
        return ColumnWidths(
            name=self.name,
            link_count=self.link_count,
            user=self.user,
            group=self.group,
            size=self.size,
        )


def track_widths(entries: Iterable[FileEntry], human_readable: bool = False) -> ColumnWidths:
    """Reduce ``entries`` to their column maxima."""
    tracker = WidthTracker(human_readable=human_readable)
    for entry in entries:
        tracker.observe(entry)
    return tracker.finalize()


__all__ = [
    "HUMAN_READABLE_SIZE_WIDTH",
    "count_digits",
    "WidthTracker",
    "track_widths",
]
