"""Domain datatypes for directory listings held by the navigation cache."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from ..errors import PathError

PARENT_SHORTCUT_NAME = ".."


@dataclass(frozen=True)
class Entry:
    """One file or directory row, addressed by its parent directory and name."""

    parent: Path
    name: str
    is_file: bool = False

    @property
    def full_path(self) -> Path:
        """Return ``parent / name`` without touching the filesystem."""
        return self.parent / self.name

    @property
    def is_parent_shortcut(self) -> bool:
        return self.name == PARENT_SHORTCUT_NAME

    def canonical_path(self) -> Path:
        """Resolve symlinks and ``..`` components.

        Raises ``PathError`` when the target no longer exists, which is how a
        stale row (deleted or moved externally) is detected.
        """
        try:
            return self.full_path.resolve(strict=True)
        except (OSError, RuntimeError) as exc:
            raise PathError(f"cannot resolve {self.full_path}: {exc}") from exc


@dataclass(frozen=True)
class DirectorySnapshot:
    """Sorted children of one directory plus the time they were read."""

    entries: tuple[Entry, ...]
    loaded_at: datetime = field(default_factory=datetime.now)

    @property
    def has_parent_shortcut(self) -> bool:
        return bool(self.entries) and self.entries[0].is_parent_shortcut


__all__ = [
    "PARENT_SHORTCUT_NAME",
    "Entry",
    "DirectorySnapshot",
]
