"""Resolved listing configuration plus persisted user defaults.

``ListingConfig`` is built once by the CLI and passed explicitly to the
collector, layout and renderers. Persisted defaults are a small JSON object in
the platform config directory; malformed or missing files fall back to no
defaults.
"""

from __future__ import annotations

import enum
import json
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "lazyls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_KEYS: tuple[str, ...] = (
    "no_color",
    "no_classify",
    "human_readable",
    "numeric_permissions",
    "numeric_ids",
    "long_format",
)


class IgnorePolicy(enum.IntFlag):
    """Which directory children the collector drops."""

    NONE = 0
    HIDDEN = 0x01
    DIRECTORIES = 0x02
    DOTS = 0x04
    FILES = 0x08


class SortKey(enum.Enum):
    NAME = "name"
    SIZE = "size"
    TIME = "time"


class ListingMode(enum.Enum):
    LONG = "long"
    GRID = "grid"
    ONE_PER_LINE = "one_per_line"


@dataclass(frozen=True)
class ListingConfig:
    """Immutable, fully resolved options for one run."""

    paths: tuple[Path, ...] = (Path("."),)
    ignore_policy: IgnorePolicy = IgnorePolicy.HIDDEN
    classify: bool = True
    long_format: bool = False
    one_per_line: bool = False
    color: bool = False
    numeric_permissions: bool = False
    recursive: bool = False
    numeric_ids: bool = False
    human_readable: bool = False
    reverse: bool = False
    sort_key: SortKey = SortKey.NAME
    interactive: bool = True
    terminal_width: int | None = field(default=None, compare=False)

    @property
    def mode(self) -> ListingMode:
        """Long format wins; otherwise one name per line off-terminal or on request."""
        if self.long_format:
            return ListingMode.LONG
        if self.one_per_line or not self.interactive:
            return ListingMode.ONE_PER_LINE
        return ListingMode.GRID


def ignore_policy_for(
    *,
    show_all: bool = False,
    almost_all: bool = False,
    directories_only: bool = False,
    files_only: bool = False,
) -> IgnorePolicy:
    """Combine visibility flags into an ``IgnorePolicy``."""
    policy = IgnorePolicy.HIDDEN
    if show_all or almost_all:
        policy &= ~IgnorePolicy.HIDDEN
    if almost_all:
        policy |= IgnorePolicy.DOTS
    if directories_only:
        policy |= IgnorePolicy.FILES
    if files_only:
        policy |= IgnorePolicy.DIRECTORIES
    return policy


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON, ignoring write failures."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        pass


def load_defaults() -> dict[str, bool]:
    """Return persisted boolean defaults for known option keys.

    Only explicit booleans are accepted; other values are dropped.
    """
    data = load_config()
    defaults: dict[str, bool] = {}
    for key in DEFAULT_KEYS:
        value = data.get(key)
        if isinstance(value, bool):
            defaults[key] = value
    return defaults


def save_default(key: str, value: bool) -> None:
    """Persist one boolean default."""
    if key not in DEFAULT_KEYS:
        raise KeyError(key)
    config = load_config()
    config[key] = bool(value)
    save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "DEFAULT_KEYS",
    "IgnorePolicy",
    "SortKey",
    "ListingMode",
    "ListingConfig",
    "ignore_policy_for",
    "load_config",
    "save_config",
    "load_defaults",
    "save_default",
]
