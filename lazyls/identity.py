"""User/group display-name resolution with numeric fallback.

Lookups go through the system identity databases and are memoized per id.
A missing record never raises: the id itself is returned as text.
"""

from __future__ import annotations

import grp
import pwd
from functools import lru_cache

IDENTITY_CACHE_MAX = 256


@lru_cache(maxsize=IDENTITY_CACHE_MAX)
def user_name(uid: int) -> str:
    """Return the login name for ``uid`` or ``str(uid)`` when unknown."""
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return str(uid)


@lru_cache(maxsize=IDENTITY_CACHE_MAX)
def group_name(gid: int) -> str:
    """Return the group name for ``gid`` or ``str(gid)`` when unknown."""
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return str(gid)


def owner_display(uid: int, numeric: bool) -> str:
    return str(uid) if numeric else user_name(uid)


def group_display(gid: int, numeric: bool) -> str:
    return str(gid) if numeric else group_name(gid)


def clear_identity_cache() -> None:
    """Drop memoized lookups."""
    user_name.cache_clear()
    group_name.cache_clear()


__all__ = [
    "user_name",
    "group_name",
    "owner_display",
    "group_display",
    "clear_identity_cache",
]
