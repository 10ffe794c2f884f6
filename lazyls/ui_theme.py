"""ANSI palettes for listing output.

Themes are presentation-only: the renderer hands plain field text plus the
entry type to ``lazyls.render.ansi`` which looks colors up here.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .listing_model.types import FileType


class Color(enum.IntEnum):
    BLACK = 30
    RED = 31
    GREEN = 32
    BROWN = 33
    BLUE = 34
    PURPLE = 35
    CYAN = 36
    WHITE = 37


class Shade(enum.IntEnum):
    LIGHT = 0
    NORMAL = 1
    DARK = 2


def sgr(color: Color, shade: Shade = Shade.LIGHT) -> str:
    """Return the ``ESC[<shade>;<color>m`` select-graphic-rendition sequence."""
    return f"\033[{int(shade)};{int(color)}m"


@dataclass(frozen=True)
class ListingTheme:
    """Semantic ANSI palette used by the row formatter."""

    name: str
    reset: str
    glyph_directory: str
    glyph_char: str
    glyph_block: str
    glyph_other: str
    triad_colors: Mapping[str, str]
    triad_other: str
    digit_colors: tuple[str, ...]
    name_colors: Mapping[FileType, str]
    name_other: str
    indicator: str
    owner: str
    group: str
    mod_time: str
    size: str
    link_count: str


DEFAULT_THEME = ListingTheme(
    name="default",
    reset="\033[0m",
    glyph_directory=sgr(Color.PURPLE),
    glyph_char=sgr(Color.BROWN),
    glyph_block=sgr(Color.RED),
    glyph_other=sgr(Color.WHITE),
    triad_colors=MappingProxyType(
        {
            "r--": sgr(Color.GREEN),
            "rw-": sgr(Color.BLUE),
            "rwx": sgr(Color.CYAN),
            "r-x": sgr(Color.BROWN),
        }
    ),
    triad_other=sgr(Color.WHITE),
    # Indexed by octal digit 0-7.
    digit_colors=(
        sgr(Color.RED),
        sgr(Color.GREEN, Shade.DARK),
        sgr(Color.BROWN, Shade.DARK),
        sgr(Color.PURPLE),
        sgr(Color.GREEN),
        sgr(Color.BROWN),
        sgr(Color.BLUE),
        sgr(Color.CYAN),
    ),
    name_colors=MappingProxyType(
        {
            FileType.BLOCK: sgr(Color.BLUE, Shade.NORMAL),
            FileType.CHAR: sgr(Color.GREEN, Shade.NORMAL),
            FileType.DIRECTORY: sgr(Color.BROWN),
            FileType.FIFO: sgr(Color.BROWN, Shade.NORMAL),
            FileType.LINK: sgr(Color.BLUE),
            FileType.SOCKET: sgr(Color.WHITE, Shade.NORMAL),
            FileType.WHITEOUT: sgr(Color.RED),
            FileType.EXECUTABLE: sgr(Color.CYAN),
        }
    ),
    name_other=sgr(Color.WHITE),
    indicator=sgr(Color.RED),
    owner=sgr(Color.GREEN, Shade.NORMAL),
    group=sgr(Color.GREEN, Shade.NORMAL),
    mod_time=sgr(Color.RED, Shade.NORMAL),
    size=sgr(Color.WHITE, Shade.NORMAL),
    link_count=sgr(Color.WHITE, Shade.NORMAL),
)

PLAIN_THEME = ListingTheme(
    name="plain",
    reset="",
    glyph_directory="",
    glyph_char="",
    glyph_block="",
    glyph_other="",
    triad_colors=MappingProxyType({}),
    triad_other="",
    digit_colors=("",) * 8,
    name_colors=MappingProxyType({}),
    name_other="",
    indicator="",
    owner="",
    group="",
    mod_time="",
    size="",
    link_count="",
)


def resolve_theme(*, no_color: bool = False) -> ListingTheme:
    """Return the concrete theme for the requested color mode."""
    if no_color:
        return PLAIN_THEME
    return DEFAULT_THEME


__all__ = [
    "Color",
    "Shade",
    "sgr",
    "ListingTheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "resolve_theme",
]
