"""User-visible error reporting on the diagnostic stream."""

from __future__ import annotations

import sys
from typing import TextIO

PROGRAM_NAME = "lazyls"


def format_error(message: str, exc: BaseException | None = None) -> str:
    """Return ``lazyls: message`` with the OS reason appended when known."""
    reason = None
    if isinstance(exc, OSError):
        reason = exc.strerror or str(exc)
    elif exc is not None:
        reason = str(exc) or None
    if reason:
        return f"{PROGRAM_NAME}: {message}: {reason}"
    return f"{PROGRAM_NAME}: {message}"


def report_error(message: str, exc: BaseException | None = None, stream: TextIO | None = None) -> None:
    """Write one diagnostic line to ``stream`` (stderr by default)."""
    out = stream if stream is not None else sys.stderr
    out.write(format_error(message, exc) + "\n")
    out.flush()


__all__ = ["PROGRAM_NAME", "format_error", "report_error"]
