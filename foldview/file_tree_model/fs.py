"""Filesystem scanning and entry construction for directory snapshots."""

from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from ..errors import FsReadError, PathError
from .types import PARENT_SHORTCUT_NAME, DirectorySnapshot, Entry


def entry_from_path(path: Path) -> Entry:
    """Build an ``Entry`` for ``path``.

    Raises ``PathError`` when the path has no file name or no parent, which is
    the case for the filesystem root.
    """
    name = path.name
    parent = path.parent
    if not name or name in {".", PARENT_SHORTCUT_NAME} or parent == path:
        raise PathError(f"cannot build an entry for {path}: no file name or parent")
    return Entry(parent=parent, name=name, is_file=path.is_file())


def relative_to(entry: Entry, reference: Path) -> str:
    """Render ``entry`` relative to the ancestor directory ``reference``.

    Direct children render as their bare name, flattened descendants as
    ``nested/deep/file.txt``. Raises ``PathError`` when ``reference`` is not a
    prefix of the entry's parent.
    """
    try:
        prefix = entry.parent.relative_to(reference)
    except ValueError as exc:
        raise PathError(f"{entry.parent} is not under {reference}") from exc
    if prefix == Path("."):
        return entry.name
    return f"{prefix.as_posix()}/{entry.name}"


def parent_shortcut(directory: Path) -> Entry | None:
    """Return the synthetic ``..`` row for ``directory``, or ``None`` at the root."""
    if directory.parent == directory:
        return None
    return Entry(parent=directory, name=PARENT_SHORTCUT_NAME, is_file=False)


def list_directory_entries(directory: Path) -> list[Entry]:
    """List children of ``directory`` sorted by name.

    Rows that cannot be described (broken symlinks, entries removed while
    scanning) are skipped so one bad child never hides its siblings. Raises
    ``FsReadError`` when the directory itself cannot be read.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                try:
                    is_dir = child.is_dir()
                    if not is_dir and not child.is_file() and not os.path.exists(child.path):
                        logger.debug("skipping dangling entry {}", child.path)
                        continue
                except OSError as exc:
                    logger.debug("skipping unreadable entry {}: {}", child.path, exc)
                    continue
                entries.append(Entry(parent=directory, name=child.name, is_file=not is_dir))
    except OSError as exc:
        raise FsReadError(f"unable to read directory {directory}: {exc}") from exc

    entries.sort(key=lambda item: item.name)
    return entries


def build_directory_snapshot(directory: Path, add_parent_shortcut: bool = True) -> DirectorySnapshot:
    """Read ``directory`` into a fresh snapshot, optionally led by ``..``."""
    children = list_directory_entries(directory)
    if add_parent_shortcut:
        shortcut = parent_shortcut(directory)
        if shortcut is not None:
            children.insert(0, shortcut)
    return DirectorySnapshot(entries=tuple(children))


__all__ = [
    "entry_from_path",
    "relative_to",
    "parent_shortcut",
    "list_directory_entries",
    "build_directory_snapshot",
]
