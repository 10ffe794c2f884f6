"""Command-line front door for lazyls.

Parses flags, merges persisted defaults, and resolves one immutable
``ListingConfig``. Then runs the listing and returns its exit status.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from .app import run_listing
from .config import (
    DEFAULT_KEYS,
    ListingConfig,
    SortKey,
    ignore_policy_for,
    load_defaults,
    save_default,
)
from .terminal import is_interactive

VERSION = "1.1"

EXIT_STATUS_EPILOG = """\
Exit status:
  0  OK,
  1  minor problems (e.g., cannot access subdirectory),
  2  serious trouble (e.g., cannot access command-line argument).
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser; ``-h`` means human-readable, so help is long-only."""
    parser = argparse.ArgumentParser(
        prog="lazyls",
        description="List directory contents in a terminal-width aware grid or long table.",
        epilog=EXIT_STATUS_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument("paths", nargs="*", metavar="FILE", help="Paths to list. Defaults to current directory.")
    parser.add_argument("-a", "--all", dest="show_all", action="store_true", help="do not ignore entries starting with '.'")
    parser.add_argument(
        "-A",
        "--almost-all",
        dest="almost_all",
        action="store_true",
        help="show entries starting with '.' except '.' and '..'",
    )
    parser.add_argument("-d", "--directory", dest="directories_only", action="store_true", help="list directories only")
    parser.add_argument(
        "-D",
        "--no-directories",
        dest="files_only",
        action="store_true",
        help="list everything except directories",
    )
    parser.add_argument("-F", "--no-classify", dest="no_classify", action="store_true", help="do not append type indicators")
    parser.add_argument("-l", dest="long_format", action="store_true", help="use a long listing format")
    parser.add_argument("-1", dest="one_per_line", action="store_true", help="list one file per line")
    parser.add_argument("-C", "--no-color", dest="no_color", action="store_true", help="output without color")
    parser.add_argument(
        "-N",
        "--num-perms",
        dest="numeric_permissions",
        action="store_true",
        help="with -l, print permissions as octal digits",
    )
    parser.add_argument("-R", "--recursive", dest="recursive", action="store_true", help="list subdirectories recursively")
    parser.add_argument(
        "-n",
        "--numeric-uid-gid",
        dest="numeric_ids",
        action="store_true",
        help="with -l, print numeric user and group IDs",
    )
    parser.add_argument(
        "-h",
        "--human-readable",
        dest="human_readable",
        action="store_true",
        help="with -l, print sizes in human readable format",
    )
    parser.add_argument("-r", "--reverse", dest="reverse", action="store_true", help="reverse order while sorting")
    parser.add_argument("-S", dest="sort_size", action="store_true", help="sort by file size, largest first")
    parser.add_argument("-t", dest="sort_time", action="store_true", help="sort by modification time, newest first")
    parser.add_argument("--no-config", action="store_true", help="ignore persisted defaults")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help=f"persist the given boolean options ({', '.join(DEFAULT_KEYS)}) as defaults",
    )
    parser.add_argument("--help", action="help", help="display this help and exit")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser


def _sort_key(args: argparse.Namespace) -> SortKey:
    if args.sort_size:
        return SortKey.SIZE
    if args.sort_time:
        return SortKey.TIME
    return SortKey.NAME


def build_config(
    args: argparse.Namespace,
    defaults: dict[str, bool] | None = None,
    *,
    interactive: bool = True,
    color_capable: bool | None = None,
) -> ListingConfig:
    """Resolve parsed flags plus persisted defaults into a ``ListingConfig``.

    A flag on the command line always enables its option; a persisted
    ``True`` enables it when the flag is absent.
    """
    defaults = defaults or {}

    def enabled(key: str) -> bool:
        return bool(getattr(args, key)) or defaults.get(key, False)

    if color_capable is None:
        color_capable = interactive
    paths = tuple(Path(raw) for raw in args.paths) or (Path("."),)
    return ListingConfig(
        paths=paths,
        ignore_policy=ignore_policy_for(
            show_all=args.show_all,
            almost_all=args.almost_all,
            directories_only=args.directories_only,
            files_only=args.files_only,
        ),
        classify=not enabled("no_classify"),
        long_format=enabled("long_format"),
        one_per_line=args.one_per_line,
        color=color_capable and not enabled("no_color"),
        numeric_permissions=enabled("numeric_permissions"),
        recursive=args.recursive,
        numeric_ids=enabled("numeric_ids"),
        human_readable=enabled("human_readable"),
        reverse=args.reverse,
        sort_key=_sort_key(args),
        interactive=interactive,
    )


def save_defaults_from_args(args: argparse.Namespace) -> None:
    """Persist every boolean default key that is set on the command line."""
    for key in DEFAULT_KEYS:
        if getattr(args, key):
            save_default(key, True)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse CLI arguments, list the requested paths, and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)

    if args.save_defaults:
        save_defaults_from_args(args)
    defaults = {} if args.no_config else load_defaults()
    config = build_config(args, defaults, interactive=is_interactive(sys.stdout))
    return run_listing(config, sys.stdout, sys.stderr)


if __name__ == "__main__":
    raise SystemExit(main())
