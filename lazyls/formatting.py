"""Field formatting helpers shared by width tracking and row rendering."""

from __future__ import annotations

import time

SIZE_UNITS: tuple[str, ...] = ("B", "kB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
MOD_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"

_TRIAD_DIGITS: dict[str, int] = {
    "--x": 1,
    "-w-": 2,
    "-wx": 3,
    "r--": 4,
    "r-x": 5,
    "rw-": 6,
    "rwx": 7,
}


def human_readable_size(size: int) -> str:
    """Format ``size`` bytes with 1024-based units.

    Values below ten units keep one decimal; the result stays within seven
    characters up to the ``YB`` range.
    """
    value = float(max(0, size))
    unit_idx = 0
    while value >= 1024 and unit_idx < len(SIZE_UNITS) - 1:
        value /= 1024
        unit_idx += 1
    if unit_idx == 0:
        return f"{int(value)} {SIZE_UNITS[0]}"
    if value < 10:
        return f"{value:.1f} {SIZE_UNITS[unit_idx]}"
    return f"{value:.0f} {SIZE_UNITS[unit_idx]}"


def format_size(size: int, human_readable: bool) -> str:
    return human_readable_size(size) if human_readable else str(size)


def triad_digit(triad: str) -> int:
    """Return the octal digit for an ``rwx`` triad; unknown shapes are ``0``."""
    return _TRIAD_DIGITS.get(triad, 0)


def format_mod_time(mtime: float) -> str:
    """Format a timestamp as a fixed 19-character local time."""
    return time.strftime(MOD_TIME_FORMAT, time.localtime(mtime))


__all__ = [
    "SIZE_UNITS",
    "MOD_TIME_FORMAT",
    "human_readable_size",
    "format_size",
    "triad_digit",
    "format_mod_time",
]
