"""Directory scanning into ``FileEntry`` records.

One pass over a directory: every child is tested against the ignore policy
(using an independent is-directory probe), stat'd, classified and turned into
an immutable entry. A child stat failure stops the pass; the entries gathered
so far are returned together with the error.
"""

from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterator
from pathlib import Path

from ..config import IgnorePolicy, ListingConfig
from ..formatting import format_mod_time
from ..identity import group_display, owner_display
from .classify import classify
from .errors import DirectoryOpenError, EntryStatError, ListingError
from .types import DirectoryListing, FileEntry

DOT_NAMES: tuple[str, ...] = (".", "..")

OwnerResolver = Callable[[int, bool], str]


def should_ignore(name: str, is_dir: bool, policy: IgnorePolicy) -> bool:
    """Return whether ``name`` is dropped under ``policy``."""
    if policy & IgnorePolicy.HIDDEN and name.startswith("."):
        return True
    if policy & IgnorePolicy.DOTS and name in DOT_NAMES:
        return True
    if policy & IgnorePolicy.DIRECTORIES and is_dir:
        return True
    if policy & IgnorePolicy.FILES and not is_dir:
        return True
    return False


def dirent_raw_type(entry: os.DirEntry[str]) -> int | None:
    """Return ``S_IFMT`` bits for a directory entry without following links.

    Cheap dirent type probes are tried first; anything they cannot name falls
    back to an ``lstat`` of the entry.
    """
    try:
        if entry.is_symlink():
            return stat.S_IFLNK
        if entry.is_dir(follow_symlinks=False):
            return stat.S_IFDIR
        if entry.is_file(follow_symlinks=False):
            return stat.S_IFREG
        return stat.S_IFMT(entry.stat(follow_symlinks=False).st_mode)
    except OSError:
        return None


def path_raw_type(path: Path) -> int | None:
    try:
        return stat.S_IFMT(os.lstat(path).st_mode)
    except OSError:
        return None


def stat_entry(path: Path) -> os.stat_result:
    """``stat`` following symlinks; dangling links fall back to ``lstat``."""
    try:
        return os.stat(path)
    except FileNotFoundError:
        if os.path.islink(path):
            return os.lstat(path)
        raise


def build_entry(
    name: str,
    path: Path,
    raw_type: int | None,
    st: os.stat_result,
    config: ListingConfig,
    resolve_owner: OwnerResolver = owner_display,
    resolve_group: OwnerResolver = group_display,
) -> FileEntry:
    """Classify one stat result into a display-ready ``FileEntry``."""
    is_executable = os.access(path, os.X_OK)
    file_type, indicator, permissions = classify(raw_type, st.st_mode, is_executable)
    display_length = len(name)
    if config.classify and indicator:
        display_length += 1
    return FileEntry(
        name=name,
        path=path,
        file_type=file_type,
        indicator=indicator,
        permissions=permissions,
        owner=resolve_owner(st.st_uid, config.numeric_ids),
        group=resolve_group(st.st_gid, config.numeric_ids),
        link_count=max(0, int(st.st_nlink)),
        size=max(0, int(st.st_size)),
        mod_time=format_mod_time(st.st_mtime),
        mtime_ns=int(st.st_mtime_ns),
        name_display_length=display_length,
    )


def _iter_children(directory: Path, scanned: list[os.DirEntry[str]]) -> Iterator[tuple[str, Path, int | None]]:
    """Yield ``(name, path, raw_type)`` with ``.``/``..`` first, as a raw read does."""
    for dot_name in DOT_NAMES:
        dot_path = directory / dot_name
        yield dot_name, dot_path, path_raw_type(dot_path)
    for child in scanned:
        yield child.name, directory / child.name, dirent_raw_type(child)


def collect_entries(
    directory: Path,
    config: ListingConfig,
    resolve_owner: OwnerResolver = owner_display,
    resolve_group: OwnerResolver = group_display,
) -> tuple[list[FileEntry], ListingError | None]:
    """Collect surviving children of ``directory`` in directory order.

    Returns ``(entries, error)``. ``error`` is a ``DirectoryOpenError`` when
    the directory cannot be read, or an ``EntryStatError`` when a child could
    not be stat'd; in the latter case ``entries`` holds what came before it.
    """
    try:
        with os.scandir(directory) as iterator:
            scanned = list(iterator)
    except OSError as exc:
        return [], DirectoryOpenError(directory, exc)

    entries: list[FileEntry] = []
    for name, child_path, raw_type in _iter_children(directory, scanned):
        if should_ignore(name, os.path.isdir(child_path), config.ignore_policy):
            continue
        try:
            st = stat_entry(child_path)
        except OSError as exc:
            return entries, EntryStatError(child_path, exc)
        entries.append(build_entry(name, child_path, raw_type, st, config, resolve_owner, resolve_group))
    return entries, None


def collect_target(
    target: Path,
    config: ListingConfig,
    resolve_owner: OwnerResolver = owner_display,
    resolve_group: OwnerResolver = group_display,
) -> tuple[DirectoryListing, ListingError | None]:
    """Collect a command-line target.

    Directories are scanned; an existing non-directory target becomes a
    single-entry listing named by the path as given.
    """
    if not os.path.isdir(target) and os.path.lexists(target):
        listing = DirectoryListing(path=target, is_directory=False)
        try:
            st = stat_entry(target)
        except OSError as exc:
            return listing, DirectoryOpenError(target, exc)
        listing.entries.append(
            build_entry(str(target), target, path_raw_type(target), st, config, resolve_owner, resolve_group)
        )
        return listing, None

    entries, error = collect_entries(target, config, resolve_owner, resolve_group)
    return DirectoryListing(path=target, entries=entries), error


__all__ = [
    "DOT_NAMES",
    "should_ignore",
    "dirent_raw_type",
    "path_raw_type",
    "stat_entry",
    "build_entry",
    "collect_entries",
    "collect_target",
]
