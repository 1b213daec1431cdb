"""Bounded LRU map from canonical directory path to its snapshot.

Entries leave the cache two ways: cold eviction when capacity is exceeded,
and invalidation when a cached directory is known to be gone. They are kept
as separate methods and logged differently.
"""

from __future__ import annotations

from collections import OrderedDict
from pathlib import Path

from loguru import logger

from ..errors import CacheError
from ..file_tree_model import DirectorySnapshot

DEFAULT_CACHE_CAPACITY = 100


class DirectoryCache:
    """LRU cache of directory snapshots; the most recent key sits at the end."""

    def __init__(self, capacity: int = DEFAULT_CACHE_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"cache capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._entries: OrderedDict[Path, DirectorySnapshot] = OrderedDict()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: Path) -> DirectorySnapshot | None:
        """Return the snapshot for ``key`` and mark it most recently used."""
        snapshot = self._entries.get(key)
        if snapshot is None:
            return None
        self._entries.move_to_end(key)
        return snapshot

    def peek(self, key: Path) -> DirectorySnapshot | None:
        """Return the snapshot for ``key`` without touching LRU order."""
        return self._entries.get(key)

    def put(self, key: Path, snapshot: DirectorySnapshot) -> list[Path]:
        """Insert or replace ``key`` as most recently used.

        Returns the keys evicted to stay within capacity, oldest first.
        """
        self._entries[key] = snapshot
        self._entries.move_to_end(key)
        evicted: list[Path] = []
        while len(self._entries) > self.capacity:
            cold_key, _snapshot = self._entries.popitem(last=False)
            logger.debug("evicted cold directory cache entry {}", cold_key)
            evicted.append(cold_key)
        return evicted

    def invalidate(self, key: Path) -> DirectorySnapshot:
        """Remove a key whose directory is known to be stale.

        Raises ``CacheError`` when the key is not cached.
        """
        snapshot = self._entries.pop(key, None)
        if snapshot is None:
            raise CacheError(f"expected {key} in directory cache")
        logger.info("dropped stale directory cache entry {}", key)
        return snapshot

    def keys_most_recent_first(self) -> list[Path]:
        return list(reversed(self._entries))

    def clear(self) -> None:
        self._entries.clear()


__all__ = [
    "DEFAULT_CACHE_CAPACITY",
    "DirectoryCache",
]
