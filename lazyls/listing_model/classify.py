"""Entry classification: file type, indicator character, and permission triads.

The type table is keyed by ``S_IFMT`` mode bits as reported by a directory
entry (symlinks are not followed). Regular files confirmed executable by an
access probe are re-tagged ``EXECUTABLE``; directories never are.
"""

from __future__ import annotations

import stat
from collections.abc import Callable

from .types import FileType, Permissions

_TYPE_PREDICATES: tuple[tuple[Callable[[int], bool], FileType], ...] = (
    (stat.S_ISBLK, FileType.BLOCK),
    (stat.S_ISCHR, FileType.CHAR),
    (stat.S_ISDIR, FileType.DIRECTORY),
    (stat.S_ISFIFO, FileType.FIFO),
    (stat.S_ISLNK, FileType.LINK),
    (stat.S_ISREG, FileType.REGULAR),
    (stat.S_ISSOCK, FileType.SOCKET),
    (stat.S_ISWHT, FileType.WHITEOUT),
)

INDICATORS: dict[FileType, str] = {
    FileType.DIRECTORY: "/",
    FileType.FIFO: "|",
    FileType.LINK: "@",
    FileType.SOCKET: "=",
    FileType.WHITEOUT: ">",
    FileType.EXECUTABLE: "*",
}

# Only these three get their own glyph; everything else renders as "-".
_TYPE_GLYPHS: tuple[tuple[Callable[[int], bool], str], ...] = (
    (stat.S_ISDIR, "d"),
    (stat.S_ISCHR, "c"),
    (stat.S_ISBLK, "b"),
)

_TRIAD_BITS = (
    (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR),
    (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP),
    (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH),
)


def file_type_for_mode(raw_type: int | None) -> FileType:
    """Map raw ``S_IFMT`` bits to a ``FileType`` (``UNKNOWN`` when unmatched)."""
    if raw_type is None:
        return FileType.UNKNOWN
    for predicate, file_type in _TYPE_PREDICATES:
        if raw_type and predicate(raw_type):
            return file_type
    return FileType.UNKNOWN


def indicator_for(file_type: FileType) -> str | None:
    """Return the trailing classification character for ``file_type``."""
    return INDICATORS.get(file_type)


def permission_triad(mode: int, read_bit: int, write_bit: int, exec_bit: int) -> str:
    return (
        ("r" if mode & read_bit else "-")
        + ("w" if mode & write_bit else "-")
        + ("x" if mode & exec_bit else "-")
    )


def permissions_for_mode(mode: int) -> Permissions:
    """Build the type glyph and the three ``rwx`` triads from ``st_mode``."""
    glyph = "-"
    for predicate, candidate in _TYPE_GLYPHS:
        if predicate(mode):
            glyph = candidate
    owner, group, other = (permission_triad(mode, *bits) for bits in _TRIAD_BITS)
    return Permissions(type_glyph=glyph, owner=owner, group=group, other=other)


def classify(
    raw_type: int | None,
    mode: int,
    is_executable: bool,
) -> tuple[FileType, str | None, Permissions]:
    """Return ``(file_type, indicator, permissions)`` for one entry.

    ``raw_type`` is the entry's own type tag, ``mode`` the permission-bearing
    ``st_mode`` and ``is_executable`` the result of an access probe.
    """
    file_type = file_type_for_mode(raw_type)
    if is_executable and file_type is FileType.REGULAR:
        file_type = FileType.EXECUTABLE
    return file_type, indicator_for(file_type), permissions_for_mode(mode)


__all__ = [
    "INDICATORS",
    "file_type_for_mode",
    "indicator_for",
    "permission_triad",
    "permissions_for_mode",
    "classify",
]
