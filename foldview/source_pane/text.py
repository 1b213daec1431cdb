"""File viewer payload: highlighted lines plus scroll metrics."""

from __future__ import annotations

import stat
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from ..errors import FsReadError, PathError
from .syntax import DEFAULT_STYLE, colorize_source, read_text, sanitize_terminal_text

MAX_FILE_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class FileTextInfo:
    """Rendered file content ready for the file view."""

    path: Path
    lines: tuple[str, ...]
    n_rows: int
    max_line_length: int


def text_dimensions(text: str) -> tuple[int, int]:
    """Return ``(rows, longest line length)`` for plain ``text``."""
    rows = text.splitlines()
    return len(rows), max((len(row) for row in rows), default=0)


def load_file_text_info(
    path: Path,
    style: str = DEFAULT_STYLE,
    no_color: bool = False,
    max_bytes: int = MAX_FILE_BYTES,
) -> FileTextInfo:
    """Load, sanitize, and highlight ``path`` for viewing.

    Non-regular files (FIFOs, sockets, devices) and files larger than
    ``max_bytes`` raise ``PathError`` before anything is read. Read failures
    raise ``FsReadError`` and highlighting failures ``ParseError``.
    """
    try:
        info = path.stat()
    except OSError as exc:
        raise PathError(f"cannot stat {path}: {exc}") from exc
    if not stat.S_ISREG(info.st_mode):
        raise PathError(f"{path} is not a regular file")
    size = info.st_size
    if size > max_bytes:
        raise PathError(f"{path} is too large to view ({size} bytes, limit {max_bytes})")

    try:
        source = sanitize_terminal_text(read_text(path))
    except OSError as exc:
        raise FsReadError(f"unable to read {path}: {exc}") from exc

    n_rows, max_line_length = text_dimensions(source)
    rendered = source if no_color else colorize_source(source, path, style)
    lines = rendered.splitlines()
    if len(lines) < n_rows:
        lines.extend([""] * (n_rows - len(lines)))
    logger.debug("loaded {} ({} rows, {} cols)", path, n_rows, max_line_length)
    return FileTextInfo(
        path=path,
        lines=tuple(lines[:n_rows]),
        n_rows=n_rows,
        max_line_length=max_line_length,
    )


__all__ = [
    "MAX_FILE_BYTES",
    "FileTextInfo",
    "text_dimensions",
    "load_file_text_info",
]
