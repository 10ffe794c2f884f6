"""Row rendering for finalized directory listings.

Produces plain structured rows (long, grid, or one-name-per-line) in display
order. Rows never carry colors; ``lazyls.render.ansi`` decorates them.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..config import ListingConfig, ListingMode
from ..formatting import format_size, triad_digit
from ..layout import COLUMN_SEPARATOR_WIDTH
from ..listing_model.types import DirectoryListing, FileEntry, FileType


@dataclass(frozen=True)
class NameRow:
    """Bare name record used for one-per-line output and grid cells."""

    name: str
    indicator: str
    file_type: FileType

    @property
    def display(self) -> str:
        return self.name + self.indicator


@dataclass(frozen=True)
class LongRow:
    """Long-format record: permissions, aligned counts/owners/size, time, name.

    Numeric fields are already right-aligned to the directory's widths.
    """

    type_glyph: str
    owner_perms: str
    group_perms: str
    other_perms: str
    link_count: str
    owner: str
    group: str
    size: str
    mod_time: str
    name: NameRow
    numeric_permissions: bool = False

    @property
    def permissions(self) -> str:
        return f"{self.type_glyph}{self.owner_perms}{self.group_perms}{self.other_perms}"

    def plain_text(self) -> str:
        return (
            f"{self.permissions} {self.link_count} {self.owner} {self.group} "
            f"{self.size} {self.mod_time} {self.name.display}"
        )


@dataclass(frozen=True)
class GridRowCell:
    """One grid cell; ``padding`` spaces follow the name to reach the next column."""

    name: NameRow
    padding: int


@dataclass(frozen=True)
class GridRow:
    cells: tuple[GridRowCell, ...]

    def plain_text(self) -> str:
        """Join cells with their padding; the last cell carries none."""
        if not self.cells:
            return ""
        head = "".join(cell.name.display + " " * cell.padding for cell in self.cells[:-1])
        return head + self.cells[-1].name.display


Row = LongRow | GridRow | NameRow


def name_row(entry: FileEntry, classify: bool) -> NameRow:
    indicator = entry.indicator if classify and entry.indicator else ""
    return NameRow(name=entry.name, indicator=indicator, file_type=entry.file_type)


def long_row(entry: FileEntry, listing: DirectoryListing, config: ListingConfig) -> LongRow:
    """Build one long-format record aligned to ``listing.widths``."""
    widths = listing.widths
    perms = entry.permissions
    triads = (perms.owner, perms.group, perms.other)
    if config.numeric_permissions:
        triads = tuple(str(triad_digit(triad)) for triad in triads)
    size = format_size(entry.size, config.human_readable)
    return LongRow(
        type_glyph=perms.type_glyph,
        owner_perms=triads[0],
        group_perms=triads[1],
        other_perms=triads[2],
        link_count=str(entry.link_count).rjust(widths.link_count),
        owner=entry.owner.rjust(widths.user),
        group=entry.group.rjust(widths.group),
        size=size.rjust(widths.size),
        mod_time=entry.mod_time,
        name=name_row(entry, config.classify),
        numeric_permissions=config.numeric_permissions,
    )


def iter_grid_rows(listing: DirectoryListing, config: ListingConfig) -> Iterator[GridRow]:
    """Walk the listing grid row by row, padding each cell to its column width.

    The grid is laid out by ``lazyls.listing.finalize_listing`` in grid mode.
    """
    grid = listing.grid
    if grid is None:
        raise ValueError(f"listing for {listing.label} has no grid layout")
    for cells in grid.iter_rows():
        yield GridRow(
            cells=tuple(
                GridRowCell(
                    name=name_row(cell.entry, config.classify),
                    padding=cell.column_width - cell.entry.name_display_length + COLUMN_SEPARATOR_WIDTH,
                )
                for cell in cells
            )
        )


def render_rows(listing: DirectoryListing, config: ListingConfig) -> Iterator[Row]:
    """Yield the structured rows for ``listing`` in ``config.mode``."""
    mode = config.mode
    if mode is ListingMode.LONG:
        for entry in listing.entries:
            yield long_row(entry, listing, config)
    elif mode is ListingMode.ONE_PER_LINE:
        for entry in listing.entries:
            yield name_row(entry, config.classify)
    else:
        yield from iter_grid_rows(listing, config)


__all__ = [
    "NameRow",
    "LongRow",
    "GridRowCell",
    "GridRow",
    "Row",
    "name_row",
    "long_row",
    "iter_grid_rows",
    "render_rows",
]
