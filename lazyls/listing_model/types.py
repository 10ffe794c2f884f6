"""Domain datatypes for one directory listing and its entries."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..layout import GridLayout


class FileType(Enum):
    """Closed set of entry kinds shown by the listing."""

    BLOCK = "block"
    CHAR = "char"
    DIRECTORY = "directory"
    FIFO = "fifo"
    LINK = "link"
    REGULAR = "regular"
    SOCKET = "socket"
    WHITEOUT = "whiteout"
    EXECUTABLE = "executable"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Permissions:
    """Type glyph plus owner/group/other ``rwx`` triads."""

    type_glyph: str
    owner: str
    group: str
    other: str

    def as_string(self) -> str:
        return f"{self.type_glyph}{self.owner}{self.group}{self.other}"


@dataclass(frozen=True)
class FileEntry:
    """One listed directory child with display-ready metadata."""

    name: str
    path: Path
    file_type: FileType
    indicator: str | None
    permissions: Permissions
    owner: str
    group: str
    link_count: int
    size: int
    mod_time: str
    mtime_ns: int = 0
    name_display_length: int = 0

    def __post_init__(self) -> None:
        if self.name_display_length < len(self.name):
            object.__setattr__(self, "name_display_length", len(self.name))


@dataclass(frozen=True)
class ColumnWidths:
    """Per-directory alignment maxima shared by long and grid output."""

    name: int = 0
    link_count: int = 0
    user: int = 0
    group: int = 0
    size: int = 0


@dataclass
class DirectoryListing:
    """Entries collected from one directory plus their finalized widths.

    ``entries`` is filled by the collector, reordered once by the sorter and
    read-only afterwards. ``grid`` stays ``None`` outside grid mode.
    """

    path: Path
    entries: list[FileEntry] = field(default_factory=list)
    widths: ColumnWidths = field(default_factory=ColumnWidths)
    grid: GridLayout | None = None
    is_directory: bool = True

    @property
    def label(self) -> str:
        return str(self.path)


__all__ = [
    "FileType",
    "Permissions",
    "FileEntry",
    "ColumnWidths",
    "DirectoryListing",
]
