"""Terminal probes used to choose the listing mode and grid width."""

from __future__ import annotations

import shutil
from typing import TextIO

DEFAULT_TERMINAL_SIZE = (80, 24)


def terminal_width() -> int:
    """Resolve current terminal width in columns (never below 1)."""
    term = shutil.get_terminal_size(DEFAULT_TERMINAL_SIZE)
    return max(1, term.columns)


def is_interactive(stream: TextIO) -> bool:
    """Return whether ``stream`` is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed stream.
        return False


def pass_through_undecodable_names(stream: TextIO) -> None:
    """Let ``stream`` write surrogate-escaped filenames back out as raw bytes.

    ``os.scandir`` decodes names that are not valid in the filesystem
    encoding with ``surrogateescape``; a strict text stream would refuse them.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is None:
        return
    reconfigure(errors="surrogateescape")


__all__ = ["DEFAULT_TERMINAL_SIZE", "terminal_width", "is_interactive", "pass_through_undecodable_names"]
