"""ANSI decoration of structured listing rows.

Field text arrives already padded, so wrapping it in escape sequences never
shifts alignment. With the plain theme the output equals ``row.plain_text()``.
"""

from __future__ import annotations

from collections.abc import Iterable

from ..listing_model.types import FileType
from ..ui_theme import ListingTheme
from . import GridRow, LongRow, NameRow, Row


def paint(text: str, color: str, theme: ListingTheme) -> str:
    """Wrap ``text`` in ``color`` and reset; no-op for empty color or text."""
    if not color or not text:
        return text
    return f"{color}{text}{theme.reset}"


def glyph_color(glyph: str, theme: ListingTheme) -> str:
    if glyph == "d":
        return theme.glyph_directory
    if glyph == "c":
        return theme.glyph_char
    if glyph == "b":
        return theme.glyph_block
    return theme.glyph_other


def permission_color(value: str, numeric: bool, theme: ListingTheme) -> str:
    """Color for one triad (``rwx`` form) or its octal digit."""
    if numeric:
        try:
            return theme.digit_colors[int(value)]
        except (ValueError, IndexError):
            return theme.triad_other
    return theme.triad_colors.get(value, theme.triad_other)


def name_color(file_type: FileType, theme: ListingTheme) -> str:
    return theme.name_colors.get(file_type, theme.name_other)


def format_name(row: NameRow, theme: ListingTheme) -> str:
    return paint(row.name, name_color(row.file_type, theme), theme) + paint(row.indicator, theme.indicator, theme)


def format_long_row(row: LongRow, theme: ListingTheme) -> str:
    perms = (
        paint(row.type_glyph, glyph_color(row.type_glyph, theme), theme)
        + "".join(
            paint(value, permission_color(value, row.numeric_permissions, theme), theme)
            for value in (row.owner_perms, row.group_perms, row.other_perms)
        )
    )
    fields = (
        perms,
        paint(row.link_count, theme.link_count, theme),
        paint(row.owner, theme.owner, theme),
        paint(row.group, theme.group, theme),
        paint(row.size, theme.size, theme),
        paint(row.mod_time, theme.mod_time, theme),
        format_name(row.name, theme),
    )
    return " ".join(fields)


def format_grid_row(row: GridRow, theme: ListingTheme) -> str:
    parts: list[str] = []
    last_idx = len(row.cells) - 1
    for idx, cell in enumerate(row.cells):
        parts.append(format_name(cell.name, theme))
        if idx != last_idx:
            parts.append(" " * cell.padding)
    return "".join(parts)


def format_row(row: Row, theme: ListingTheme) -> str:
    """Render one structured row as a single output line (no newline)."""
    if isinstance(row, LongRow):
        return format_long_row(row, theme)
    if isinstance(row, GridRow):
        return format_grid_row(row, theme)
    return format_name(row, theme)


def format_rows(rows: Iterable[Row], theme: ListingTheme) -> list[str]:
    return [format_row(row, theme) for row in rows]


__all__ = [
    "paint",
    "glyph_color",
    "permission_color",
    "name_color",
    "format_name",
    "format_long_row",
    "format_grid_row",
    "format_row",
    "format_rows",
]
