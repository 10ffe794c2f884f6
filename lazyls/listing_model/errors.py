"""Failures surfaced while collecting a directory listing."""

from __future__ import annotations

from pathlib import Path


class ListingError(Exception):
    """Base error carrying the path involved and the underlying ``OSError``."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause

    @property
    def message(self) -> str:
        """User-facing description; subclasses name the failed operation."""
        return f"'{self.path}'"


class DirectoryOpenError(ListingError):
    """A target or subdirectory could not be opened for reading."""

    @property
    def message(self) -> str:
        return f"cannot access '{self.path}'"


class EntryStatError(ListingError):
    """One child of an otherwise readable directory could not be stat'd."""

    @property
    def message(self) -> str:
        return f"failed to stat '{self.path}'"


__all__ = ["ListingError", "DirectoryOpenError", "EntryStatError"]
