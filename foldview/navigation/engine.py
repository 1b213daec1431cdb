"""Directory cache and navigation engine.

Owns the LRU snapshot cache, the current directory with its (possibly
flattened) children, the active filter, and the ``selected`` projection the
renderer draws. ``selected`` is always a pure function of the filter and
either the current children (browse mode) or the cache keys (history mode).
"""

from __future__ import annotations

import shutil
from pathlib import Path

from loguru import logger

from ..errors import CacheError, FsReadError, PathError, StateError
from ..file_tree_model import (
    DirectorySnapshot,
    Entry,
    build_directory_snapshot,
    entry_from_path,
    list_directory_entries,
    relative_to,
)
from ..fuzzy import should_select
from ..state import NavigationState
from .cache import DEFAULT_CACHE_CAPACITY, DirectoryCache


def canonical_directory(path: Path) -> Path:
    """Resolve ``path`` to an existing directory or raise ``PathError``."""
    try:
        resolved = Path(path).resolve(strict=True)
    except (OSError, RuntimeError) as exc:
        raise PathError(f"cannot resolve directory {path}: {exc}") from exc
    if not resolved.is_dir():
        raise PathError(f"{resolved} is not a directory")
    return resolved


def _split_parent_shortcut(children: list[Entry]) -> tuple[list[Entry], list[Entry]]:
    if children and children[0].is_parent_shortcut:
        return children[:1], children[1:]
    return [], list(children)


class NavigationEngine:
    """Browse/history selection over a bounded cache of directory snapshots.

    ``state`` is the application's single ``NavigationState``; the engine only
    reads it to pick the data source for ``selected``.
    """

    def __init__(
        self,
        start_directory: Path,
        state: NavigationState,
        capacity: int = DEFAULT_CACHE_CAPACITY,
    ) -> None:
        self.state = state
        self.cache = DirectoryCache(capacity)
        self.current_directory = canonical_directory(start_directory)
        snapshot = self.load_or_get(self.current_directory)
        self.current_children: list[Entry] = list(snapshot.entries)
        self.expand_level = 0
        self.filter = ""
        self.selected: list[Entry] = []
        self.update()

    def load_or_get(self, path: Path, add_parent_shortcut: bool = True) -> DirectorySnapshot:
        """Return the cached snapshot for ``path``, reading it on a miss.

        A hit marks ``path`` most recently used. A failed read raises
        ``FsReadError`` and leaves the cache untouched.
        """
        snapshot = self.cache.get(path)
        if snapshot is not None:
            return snapshot
        snapshot = build_directory_snapshot(path, add_parent_shortcut)
        self.cache.put(path, snapshot)
        logger.debug("cached directory {} ({} entries)", path, len(snapshot.entries))
        return snapshot

    def display_label(self, entry: Entry) -> str:
        """Text used both for fuzzy matching and for drawing ``entry``."""
        if self.state.is_history_search():
            return str(entry.full_path)
        return relative_to(entry, self.current_directory)

    def visible_labels(self) -> list[str]:
        return [self.display_label(entry) for entry in self.selected]

    def update(self, query: str | None = None) -> None:
        """Optionally replace the filter, then recompute ``selected``."""
        if query is not None:
            self.filter = query

        selected: list[Entry] = []
        if self.state.is_history_search():
            for key in self.cache.keys_most_recent_first():
                if not should_select(str(key), self.filter):
                    continue
                try:
                    selected.append(entry_from_path(key))
                except PathError:
                    logger.debug("history cannot show {}", key)
        else:
            for entry in self.current_children:
                if should_select(relative_to(entry, self.current_directory), self.filter):
                    selected.append(entry)
        self.selected = selected

    def enter(self, path: Path) -> None:
        """Make ``path`` the current directory, clearing filter and flattening."""
        directory = canonical_directory(path)
        snapshot = self.load_or_get(directory)
        self.current_directory = directory
        self.current_children = list(snapshot.entries)
        self.filter = ""
        self.expand_level = 0
        self.update()

    def expand(self) -> None:
        """Flatten every visible directory into its children, one level deeper.

        The ``..`` shortcut stays first. Sub-directories are read fresh and not
        cached. A directory that vanished is dropped; one that exists but
        cannot be read stays as a plain row.
        """
        fixed, rest = _split_parent_shortcut(self.current_children)
        flattened = list(fixed)
        for entry in rest:
            if entry.is_file:
                flattened.append(entry)
                continue
            try:
                flattened.extend(list_directory_entries(entry.full_path))
            except FsReadError as exc:
                if entry.full_path.exists():
                    logger.warning("cannot expand {}: {}", entry.full_path, exc)
                    flattened.append(entry)
                else:
                    logger.debug("dropping vanished directory {}", entry.full_path)

        self.current_children = flattened
        self.expand_level += 1
        self.update()

    def collapse(self) -> None:
        """Re-fold the flattened view by one level.

        Rows deeper than the new level are replaced by their ancestor at that
        level and duplicates are merged by canonical path. This is a lossy
        re-fold of what is visible, not an undo stack.
        """
        if self.expand_level == 0:
            return
        self.expand_level -= 1

        fixed, rest = _split_parent_shortcut(self.current_children)
        folded = list(fixed)
        seen: set[Path] = set()
        for entry in rest:
            depth = relative_to(entry, self.current_directory).count("/")
            candidate = entry
            if depth > self.expand_level:
                ancestor = entry.parent
                for _ in range(depth - self.expand_level - 1):
                    ancestor = ancestor.parent
                candidate = Entry(parent=ancestor.parent, name=ancestor.name, is_file=False)
            try:
                key = candidate.canonical_path()
            except PathError:
                logger.debug("dropping stale row {} while collapsing", candidate.full_path)
                continue
            if key in seen:
                continue
            seen.add(key)
            folded.append(candidate)

        self.current_children = folded
        self.update()

    def submit(self, index: int) -> Path:
        """Resolve ``selected[index]``; raises ``PathError`` for a stale row."""
        return self.selected[index].canonical_path()

    def drop_invalid_folder(self, index: int) -> None:
        """Remove a stale history row and invalidate its cache key."""
        if not self.state.is_history_search():
            raise StateError("dropping a folder requires history mode")
        removed = self.selected.pop(index)
        self.cache.invalidate(removed.full_path)

    def refresh(self) -> None:
        """Re-read the current directory from disk and rebuild the view."""
        snapshot = build_directory_snapshot(self.current_directory, True)
        self.cache.put(self.current_directory, snapshot)
        self.current_children = list(snapshot.entries)
        self.expand_level = 0
        self.update()

    def delete(self, index: int) -> bool:
        """Remove the file or directory tree behind ``selected[index]``.

        Best effort: failures are logged and reported through the return
        value, and the view is refreshed whenever something was attempted.
        The ``..`` shortcut is never deleted.
        """
        if not self.selected:
            return False
        entry = self.selected[index]
        if entry.is_parent_shortcut:
            logger.warning("refusing to delete the parent shortcut of {}", self.current_directory)
            return False
        try:
            entry.canonical_path()
        except PathError as exc:
            logger.warning("cannot delete stale entry: {}", exc)
            return False

        target = entry.full_path
        removed = True
        try:
            if target.is_dir() and not target.is_symlink():
                shutil.rmtree(target)
            else:
                target.unlink()
        except OSError as exc:
            logger.warning("failed to delete {}: {}", target, exc)
            removed = False
        self.refresh()
        return removed

    def peek(self) -> DirectorySnapshot:
        """Snapshot of the current directory, without changing LRU order."""
        snapshot = self.cache.peek(self.current_directory)
        if snapshot is None:
            raise CacheError(f"current directory {self.current_directory} missing from cache")
        return snapshot

    def history(self) -> list[Path]:
        return self.cache.keys_most_recent_first()


__all__ = [
    "canonical_directory",
    "NavigationEngine",
]
