"""Directory cache and navigation engine."""

from __future__ import annotations

from .cache import DEFAULT_CACHE_CAPACITY, DirectoryCache
from .engine import NavigationEngine, canonical_directory

__all__ = [
    "DEFAULT_CACHE_CAPACITY",
    "DirectoryCache",
    "NavigationEngine",
    "canonical_directory",
]
