"""Tests for the column-major grid layout engine."""

from __future__ import annotations

import unittest

from listing_helpers import make_entry
from lazyls.layout import columns_that_fit, compute_grid_layout, rows_per_column
from lazyls.listing_model import FileType


def _numbered(count: int) -> list:
    return [make_entry(f"n{idx:03d}") for idx in range(count)]


class RowCountTests(unittest.TestCase):
    def test_rows_per_column_for_twenty_column_terminal(self) -> None:
        self.assertEqual(columns_that_fit(20, 4), 4)
        self.assertEqual(rows_per_column(10, 4, 20), 3)

    def test_divisor_is_floored_at_one_for_wide_names(self) -> None:
        self.assertEqual(columns_that_fit(10, 40), 1)
        self.assertEqual(rows_per_column(5, 40, 10), 6)

    def test_zero_or_negative_width_is_treated_as_one(self) -> None:
        self.assertEqual(columns_that_fit(0, 3), 1)
        self.assertEqual(columns_that_fit(-5, 0), 1)


class GridLayoutTests(unittest.TestCase):
    def test_ten_entries_in_twenty_columns(self) -> None:
        entries = _numbered(10)

        grid = compute_grid_layout(entries, 20)

        self.assertEqual(grid.rows_per_column, 3)
        self.assertEqual(grid.full_column_count, 3)
        self.assertEqual(grid.column_count, 4)
        self.assertEqual([len(column) for column in grid.columns], [3, 3, 3, 1])
        self.assertEqual(grid.num_entries, 10)

    def test_rows_are_traversed_column_major(self) -> None:
        grid = compute_grid_layout(_numbered(10), 20)

        rows = [[cell.entry.name for cell in cells] for cells in grid.iter_rows()]

        self.assertEqual(
            rows,
            [
                ["n000", "n003", "n006", "n009"],
                ["n001", "n004", "n007"],
                ["n002", "n005", "n008"],
            ],
        )

    def test_every_entry_is_placed_exactly_once(self) -> None:
        for count in (1, 2, 7, 10, 31):
            with self.subTest(count=count):
                entries = _numbered(count)
                grid = compute_grid_layout(entries, 23)
                names = [cell.entry.name for cell in grid.iter_cells()]
                self.assertEqual(sorted(names), [entry.name for entry in entries])
                self.assertLessEqual(max(len(column) for column in grid.columns), grid.rows_per_column)

    def test_column_widths_are_tracked_per_column(self) -> None:
        entries = [
            make_entry("a"),
            make_entry("bbbbbb"),
            make_entry("cc"),
            make_entry("d"),
        ]

        grid = compute_grid_layout(entries, 21)

        self.assertEqual(grid.rows_per_column, 2)
        self.assertEqual(grid.column_widths, (6, 2))
        cells = list(grid.iter_cells())
        self.assertEqual([cell.column_width for cell in cells], [6, 2, 6, 2])

    def test_indicator_counts_toward_column_width(self) -> None:
        entries = [make_entry("sub", file_type=FileType.DIRECTORY), make_entry("abc")]

        grid = compute_grid_layout(entries, 80)

        self.assertEqual(grid.rows_per_column, 1)
        self.assertEqual(grid.column_widths, (4, 3))

    def test_single_entry(self) -> None:
        grid = compute_grid_layout(_numbered(1), 80)

        self.assertEqual(grid.rows_per_column, 1)
        self.assertEqual(grid.column_count, 1)
        self.assertEqual([[cell.entry.name for cell in row] for row in grid.iter_rows()], [["n000"]])

    def test_empty_listing_has_no_rows(self) -> None:
        grid = compute_grid_layout([], 80)

        self.assertEqual(grid.rows_per_column, 1)
        self.assertEqual(grid.full_column_count, 0)
        self.assertEqual(grid.column_count, 0)
        self.assertEqual(list(grid.iter_rows()), [])

    def test_explicit_max_width_drives_row_count(self) -> None:
        grid = compute_grid_layout(_numbered(4), 20, max_name_width=9)

        self.assertEqual(grid.rows_per_column, 3)
        self.assertEqual([len(column) for column in grid.columns], [3, 1])


if __name__ == "__main__":
    unittest.main()
