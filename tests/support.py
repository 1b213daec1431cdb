"""Shared filesystem fixtures for browser tests."""

from __future__ import annotations

from pathlib import Path

NESTED_ROOT_NAMES = ["..", ".gitkeep", "README.md", "empty", "main.rs", "src"]
NESTED_SRC_NAMES = ["..", "lib.rs", "module.rs", "nested"]


def write_file(root: Path, relative: str, content: str = "") -> Path:
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


def create_nested_structure(root: Path) -> None:
    """Create the small project tree most scenarios browse.

    root: README.md main.rs .gitkeep src/ empty/
    src:  lib.rs module.rs nested/deep/file.txt
    """
    write_file(root, "README.md", "# Test Project\nThis is a readme.")
    write_file(root, "main.rs", 'fn main() { println!("hello"); }')
    write_file(root, ".gitkeep")
    write_file(root, "src/lib.rs", "pub fn helper() {}")
    write_file(root, "src/module.rs", "mod tests { /* ... */ }")
    write_file(root, "src/nested/deep/file.txt", "deep content")
    (root / "empty").mkdir()
