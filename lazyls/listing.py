"""Listing pipeline: collect, sort, measure, lay out, and recurse depth-first."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .config import ListingConfig, ListingMode
from .identity import group_display, owner_display
from .layout import compute_grid_layout
from .listing_model import (
    DirectoryListing,
    FileType,
    ListingError,
    collect_entries,
    collect_target,
    sort_entries,
    track_widths,
)
from .listing_model.collect import DOT_NAMES, OwnerResolver
from .terminal import terminal_width


@dataclass(frozen=True)
class ListingResult:
    """One visited directory: its listing, any collection error, and nesting depth."""

    listing: DirectoryListing
    error: ListingError | None = None
    depth: int = 0

    @property
    def renderable(self) -> bool:
        """Partial listings from a child stat failure are not shown."""
        return self.error is None


def finalize_listing(listing: DirectoryListing, config: ListingConfig, width: int) -> DirectoryListing:
    """Sort entries, freeze column widths, and build the grid in grid mode."""
    listing.entries = sort_entries(listing.entries, reverse=config.reverse, key=config.sort_key)
    listing.widths = track_widths(listing.entries, human_readable=config.human_readable)
    if config.mode is ListingMode.GRID:
        listing.grid = compute_grid_layout(listing.entries, width, listing.widths.name)
    else:
        listing.grid = None
    return listing


def _subdirectories(listing: DirectoryListing) -> list[Path]:
    return [
        entry.path
        for entry in listing.entries
        if entry.file_type is FileType.DIRECTORY and entry.name not in DOT_NAMES
    ]


def iter_directory_listings(
    directory: Path,
    config: ListingConfig,
    *,
    width: int,
    depth: int = 0,
    resolve_owner: OwnerResolver = owner_display,
    resolve_group: OwnerResolver = group_display,
) -> Iterator[ListingResult]:
    """Yield ``directory`` then, when recursive, each subdirectory depth-first."""
    entries, error = collect_entries(directory, config, resolve_owner, resolve_group)
    listing = finalize_listing(DirectoryListing(path=directory, entries=entries), config, width)
    yield ListingResult(listing=listing, error=error, depth=depth)
    if error is not None or not config.recursive:
        return
    for child in _subdirectories(listing):
        yield from iter_directory_listings(
            child,
            config,
            width=width,
            depth=depth + 1,
            resolve_owner=resolve_owner,
            resolve_group=resolve_group,
        )


def iter_target_listings(
    target: Path,
    config: ListingConfig,
    *,
    width_provider: Callable[[], int] = terminal_width,
    resolve_owner: OwnerResolver = owner_display,
    resolve_group: OwnerResolver = group_display,
) -> Iterator[ListingResult]:
    """Yield every listing produced by one command-line target, parent first.

    Terminal width is read once per target and shared by its recursion.
    """
    width = config.terminal_width if config.terminal_width is not None else width_provider()
    listing, error = collect_target(target, config, resolve_owner, resolve_group)
    listing = finalize_listing(listing, config, width)
    yield ListingResult(listing=listing, error=error, depth=0)
    if error is not None or not config.recursive or not listing.is_directory:
        return
    for child in _subdirectories(listing):
        yield from iter_directory_listings(
            child,
            config,
            width=width,
            depth=1,
            resolve_owner=resolve_owner,
            resolve_group=resolve_group,
        )


__all__ = [
    "ListingResult",
    "finalize_listing",
    "iter_directory_listings",
    "iter_target_listings",
]
