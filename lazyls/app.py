"""Run loop: list every target in argument order and compute the exit status.

Each target is fully rendered (including its recursive descent) before the
next one starts. Failures are reported on the diagnostic stream and never
stop the remaining listings.
"""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from .config import ListingConfig
from .diagnostics import report_error
from .identity import group_display, owner_display
from .listing import ListingResult, iter_target_listings
from .listing_model import DirectoryOpenError
from .listing_model.collect import OwnerResolver
from .render import render_rows
from .render.ansi import format_rows
from .terminal import pass_through_undecodable_names, terminal_width
from .ui_theme import resolve_theme

EXIT_OK = 0
EXIT_MINOR = 1
EXIT_SERIOUS = 2


def severity_for(result: ListingResult) -> int:
    """A top-level target that cannot be opened is serious; all else is minor."""
    if result.error is None:
        return EXIT_OK
    if result.depth == 0 and isinstance(result.error, DirectoryOpenError):
        return EXIT_SERIOUS
    return EXIT_MINOR


class ListingRunner:
    """Stream listings for all configured targets to ``stdout``.

    With a single target the first listing is held back until a second
    directory turns up, so a lone directory is printed without a header.
    """

    def __init__(
        self,
        config: ListingConfig,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        *,
        width_provider: Callable[[], int] = terminal_width,
        resolve_owner: OwnerResolver = owner_display,
        resolve_group: OwnerResolver = group_display,
    ) -> None:
        self.config = config
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        pass_through_undecodable_names(self.stdout)
        self.width_provider = width_provider
        self.resolve_owner = resolve_owner
        self.resolve_group = resolve_group
        self.theme = resolve_theme(no_color=not config.color)
        self.status = EXIT_OK
        self.show_headers = len(config.paths) > 1
        self._visited = 0
        self._pending: ListingResult | None = None
        self._emitted = 0

    def run(self) -> int:
        for target in self.config.paths:
            for result in iter_target_listings(
                target,
                self.config,
                width_provider=self.width_provider,
                resolve_owner=self.resolve_owner,
                resolve_group=self.resolve_group,
            ):
                self.handle(result)
        self.flush_pending()
        self.stdout.flush()
        return self.status

    def handle(self, result: ListingResult) -> None:
        if result.error is not None:
            report_error(result.error.message, result.error.cause, self.stderr)
            self.status = max(self.status, severity_for(result))
        self._visited += 1
        if self._visited > 1 and not self.show_headers:
            self.show_headers = True
            self.flush_pending()
        if not result.renderable:
            return
        if self.show_headers:
            self.emit(result)
        else:
            self._pending = result

    def flush_pending(self) -> None:
        if self._pending is not None:
            pending, self._pending = self._pending, None
            self.emit(pending)

    def emit(self, result: ListingResult) -> None:
        listing = result.listing
        if self._emitted:
            self.stdout.write("\n")
        if self.show_headers and listing.is_directory:
            self.stdout.write(f"{listing.label}:\n")
        for line in format_rows(render_rows(listing, self.config), self.theme):
            self.stdout.write(line + "\n")
        self._emitted += 1


def run_listing(config: ListingConfig, stdout: TextIO | None = None, stderr: TextIO | None = None) -> int:
    """List every target in ``config`` and return the process exit status."""
    return ListingRunner(config, stdout, stderr).run()


__all__ = [
    "EXIT_OK",
    "EXIT_MINOR",
    "EXIT_SERIOUS",
    "severity_for",
    "ListingRunner",
    "run_listing",
]
