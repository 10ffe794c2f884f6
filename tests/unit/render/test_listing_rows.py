"""Tests for structured long, grid and one-per-line rows."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazyls.config import ListingConfig
from lazyls.listing import finalize_listing
from lazyls.listing_model import DirectoryListing, FileType
from lazyls.render import GridRow, LongRow, NameRow, render_rows
from listing_helpers import make_entry

TIME = "2024-01-02 03:04:05"


def _listing(entries, config: ListingConfig, width: int = 80) -> DirectoryListing:
    return finalize_listing(DirectoryListing(path=Path("."), entries=list(entries)), config, width)


def _sample_entries() -> list:
    return [
        make_entry("sub", file_type=FileType.DIRECTORY, size=4096, link_count=2, owner="nobody"),
        make_entry("a.txt", size=120),
        make_entry("run.sh", file_type=FileType.EXECUTABLE, size=10),
    ]


class LongRowTests(unittest.TestCase):
    def test_long_rows_align_counts_owners_and_sizes(self) -> None:
        config = ListingConfig(long_format=True)

        rows = list(render_rows(_listing(_sample_entries(), config), config))

        self.assertTrue(all(isinstance(row, LongRow) for row in rows))
        self.assertEqual(
            [row.plain_text() for row in rows],
            [
                f"-rw-r--r-- 1   user staff  120 {TIME} a.txt",
                f"-rw-r--r-- 1   user staff   10 {TIME} run.sh*",
                f"drw-r--r-- 2 nobody staff 4096 {TIME} sub/",
            ],
        )

    def test_long_row_fields_round_trip(self) -> None:
        config = ListingConfig(long_format=True)

        row = next(iter(render_rows(_listing(_sample_entries(), config), config)))

        self.assertEqual(row.permissions, "-rw-r--r--")
        self.assertEqual(row.size.strip(), "120")
        self.assertEqual(row.owner.strip(), "user")
        self.assertEqual(row.mod_time, TIME)
        self.assertEqual(row.name.display, "a.txt")

    def test_numeric_permissions_render_octal_digits(self) -> None:
        config = ListingConfig(long_format=True, numeric_permissions=True)

        rows = list(render_rows(_listing(_sample_entries(), config), config))

        self.assertEqual(rows[0].permissions, "-644")
        self.assertEqual(rows[2].permissions, "d644")
        self.assertTrue(rows[0].numeric_permissions)

    def test_human_readable_sizes_share_a_fixed_width(self) -> None:
        config = ListingConfig(long_format=True, human_readable=True)

        rows = list(render_rows(_listing(_sample_entries(), config), config))

        self.assertEqual([row.size for row in rows], ["  120 B", "   10 B", " 4.0 kB"])

    def test_no_classify_drops_indicators(self) -> None:
        config = ListingConfig(long_format=True, classify=False)
        entries = [make_entry("sub", file_type=FileType.DIRECTORY, classify=False)]

        rows = list(render_rows(_listing(entries, config), config))

        self.assertEqual(rows[0].name.display, "sub")


class NameRowTests(unittest.TestCase):
    def test_non_interactive_output_is_one_name_per_line(self) -> None:
        config = ListingConfig(interactive=False)

        rows = list(render_rows(_listing(_sample_entries(), config), config))

        self.assertEqual(rows, [
            NameRow("a.txt", "", FileType.REGULAR),
            NameRow("run.sh", "*", FileType.EXECUTABLE),
            NameRow("sub", "/", FileType.DIRECTORY),
        ])

    def test_one_per_line_flag_wins_on_a_terminal(self) -> None:
        config = ListingConfig(one_per_line=True)

        rows = list(render_rows(_listing(_sample_entries(), config), config))

        self.assertEqual([row.display for row in rows], ["a.txt", "run.sh*", "sub/"])


class GridRowTests(unittest.TestCase):
    def test_grid_rows_follow_column_major_layout(self) -> None:
        config = ListingConfig()
        entries = [make_entry(f"n{idx:03d}") for idx in range(10)]

        rows = list(render_rows(_listing(entries, config, width=20), config))

        self.assertTrue(all(isinstance(row, GridRow) for row in rows))
        self.assertEqual(
            [row.plain_text() for row in rows],
            ["n000 n003 n006 n009", "n001 n004 n007", "n002 n005 n008"],
        )

    def test_cells_are_padded_to_their_column_width(self) -> None:
        config = ListingConfig()
        entries = [make_entry("a"), make_entry("bbbbbb"), make_entry("cc"), make_entry("d")]

        rows = list(render_rows(_listing(entries, config, width=21), config))

        self.assertEqual([cell.padding for cell in rows[0].cells], [6, 1])
        self.assertEqual([row.plain_text() for row in rows], ["a      cc", "bbbbbb d"])

    def test_indicator_is_part_of_the_cell(self) -> None:
        config = ListingConfig()
        entries = [make_entry("sub", file_type=FileType.DIRECTORY), make_entry("x")]

        rows = list(render_rows(_listing(entries, config, width=80), config))

        self.assertEqual([row.plain_text() for row in rows], ["sub/ x"])

    def test_empty_listing_renders_nothing(self) -> None:
        config = ListingConfig()

        self.assertEqual(list(render_rows(_listing([], config), config)), [])

    def test_grid_mode_requires_a_laid_out_listing(self) -> None:
        listing = DirectoryListing(path=Path("."), entries=[make_entry("a")])

        with self.assertRaises(ValueError):
            list(render_rows(listing, ListingConfig()))


if __name__ == "__main__":
    unittest.main()
