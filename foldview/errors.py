"""Error hierarchy shared by the engine and the terminal front-end.

Every failure the browser can report derives from ``AppError``. The ``kind``
label is what the status line shows, so callers can catch the base class and
still tell the user which layer failed.
"""

from __future__ import annotations


class AppError(Exception):
    """Base class for recoverable browser failures."""

    kind = "App"

    def __str__(self) -> str:
        message = super().__str__()
        return f"{self.kind} error: {message}" if message else f"{self.kind} error"


class FsReadError(AppError):
    """Filesystem read or metadata failure (directory listing, file read)."""

    kind = "Io"


class PathError(AppError):
    """Path cannot be resolved: missing name/parent, stale entry, bad prefix, too large."""

    kind = "Path"


class ParseError(AppError):
    """Content could not be interpreted (highlighting, index conversion)."""

    kind = "Parse"


class CacheError(AppError):
    """Directory cache lost a key it was expected to hold."""

    kind = "Cache"


class StateError(AppError):
    """Operation invoked while the state machine is in an incompatible mode."""

    kind = "State"


__all__ = [
    "AppError",
    "FsReadError",
    "PathError",
    "ParseError",
    "CacheError",
    "StateError",
]
