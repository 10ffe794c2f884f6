"""Column-major grid layout for multi-column listings.

Given the entry count, the widest display name and the terminal width, the
engine picks a row count, fills columns top-to-bottom in display order and
tracks a width per column so later columns may be narrower than earlier ones.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from .listing_model.types import FileEntry

COLUMN_SEPARATOR_WIDTH = 1


def columns_that_fit(terminal_width: int, max_name_width: int) -> int:
    """Return how many ``max_name_width`` cells plus separator fit, at least one."""
    cell_width = max(0, max_name_width) + COLUMN_SEPARATOR_WIDTH
    return max(1, max(1, terminal_width) // cell_width)


def rows_per_column(num_entries: int, max_name_width: int, terminal_width: int) -> int:
    """Row count used before wrapping into the next column."""
    return max(0, num_entries) // columns_that_fit(terminal_width, max_name_width) + 1


@dataclass(frozen=True)
class GridCell:
    """One placed entry plus the width of the column it sits in."""

    entry: FileEntry
    column: int
    row: int
    column_width: int


@dataclass(frozen=True)
class GridLayout:
    """Entries partitioned into columns, each column at most ``rows_per_column`` tall.

    ``full_column_count`` is ``num_entries // rows_per_column``; any remainder
    sits in one shorter trailing column, so ``columns`` may hold one more.
    """

    rows_per_column: int
    full_column_count: int
    columns: tuple[tuple[FileEntry, ...], ...]
    column_widths: tuple[int, ...]

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def num_entries(self) -> int:
        return sum(len(column) for column in self.columns)

    def iter_rows(self) -> Iterator[tuple[GridCell, ...]]:
        """Yield populated grid rows left to right, top to bottom.

        A column shorter than the current row is skipped; traversal stops at
        the first row with no populated cell.
        """
        for row in range(self.rows_per_column):
            cells = tuple(
                GridCell(entry=column[row], column=col_idx, row=row, column_width=self.column_widths[col_idx])
                for col_idx, column in enumerate(self.columns)
                if row < len(column)
            )
            if not cells:
                return
            yield cells

    def iter_cells(self) -> Iterator[GridCell]:
        """Yield cells in traversal (row-wise) order."""
        for cells in self.iter_rows():
            yield from cells


def compute_grid_layout(
    entries: Sequence[FileEntry],
    terminal_width: int,
    max_name_width: int | None = None,
) -> GridLayout:
    """Partition ``entries`` column-major for a ``terminal_width`` wide grid."""
    if max_name_width is None:
        max_name_width = max((entry.name_display_length for entry in entries), default=0)
    rows = rows_per_column(len(entries), max_name_width, terminal_width)

    columns: list[tuple[FileEntry, ...]] = []
    widths: list[int] = []
    for start in range(0, len(entries), rows):
        column = tuple(entries[start : start + rows])
        columns.append(column)
        widths.append(max(entry.name_display_length for entry in column))

    return GridLayout(
        rows_per_column=rows,
        full_column_count=len(entries) // rows,
        columns=tuple(columns),
        column_widths=tuple(widths),
    )


__all__ = [
    "COLUMN_SEPARATOR_WIDTH",
    "columns_that_fit",
    "rows_per_column",
    "GridCell",
    "GridLayout",
    "compute_grid_layout",
]
