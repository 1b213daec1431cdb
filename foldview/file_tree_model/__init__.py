"""Domain model for directory entries and their snapshots.

This package contains non-UI primitives:
- entry and snapshot datatypes
- filesystem scanning helpers that build sorted snapshots
- relative-path rendering for flattened views
"""

from __future__ import annotations

from .types import PARENT_SHORTCUT_NAME, DirectorySnapshot, Entry
from .fs import (
    build_directory_snapshot,
    entry_from_path,
    list_directory_entries,
    parent_shortcut,
    relative_to,
)

__all__ = [
    "PARENT_SHORTCUT_NAME",
    "Entry",
    "DirectorySnapshot",
    "entry_from_path",
    "relative_to",
    "parent_shortcut",
    "list_directory_entries",
    "build_directory_snapshot",
]
