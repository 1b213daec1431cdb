"""Tests for browse-mode engine behavior: filtering, entering, flattening."""

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from support import NESTED_ROOT_NAMES, NESTED_SRC_NAMES, create_nested_structure, write_file

from foldview.errors import CacheError, FsReadError, PathError, StateError
from foldview.navigation import NavigationEngine, canonical_directory
from foldview.state import NavigationState


class EngineBrowseTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name).resolve()
        create_nested_structure(self.root)
        self.state = NavigationState()
        self.engine = NavigationEngine(self.root, self.state)

    def tearDown(self) -> None:
        self._tmp.cleanup()

    def test_initial_listing_is_sorted_with_parent_first(self) -> None:
        self.assertEqual(self.engine.visible_labels(), NESTED_ROOT_NAMES)
        self.assertEqual(self.engine.current_directory, self.root)
        self.assertEqual(self.engine.history(), [self.root])

    def test_update_filters_by_subsequence(self) -> None:
        self.engine.update("mrs")
        self.assertEqual(self.engine.visible_labels(), ["main.rs"])
        self.assertEqual(self.engine.filter, "mrs")

    def test_filter_selects_only_matching_directory(self) -> None:
        self.engine.update("src")
        self.assertEqual(self.engine.visible_labels(), ["src"])

    def test_update_is_idempotent(self) -> None:
        self.engine.update("e")
        first = list(self.engine.selected)
        self.engine.update()
        self.engine.update("e")
        self.assertEqual(self.engine.selected, first)

    def test_enter_clears_filter_and_loads_children(self) -> None:
        self.engine.update("src")
        self.engine.enter(self.root / "src")

        self.assertEqual(self.engine.filter, "")
        self.assertEqual(self.engine.expand_level, 0)
        self.assertEqual(self.engine.visible_labels(), NESTED_SRC_NAMES)
        self.assertEqual(self.engine.history(), [self.root / "src", self.root])

    def test_returning_to_a_directory_reuses_its_snapshot(self) -> None:
        first = self.engine.peek()
        self.engine.enter(self.root / "src")
        self.engine.enter(self.root)

        self.assertIs(self.engine.peek(), first)
        self.assertEqual(self.engine.history(), [self.root, self.root / "src"])

    def test_cached_snapshot_hides_changes_until_refresh(self) -> None:
        self.engine.enter(self.root / "src")
        self.engine.enter(self.root)
        write_file(self.root, "added.txt")

        self.engine.enter(self.root / "src")
        self.engine.enter(self.root)
        self.assertNotIn("added.txt", self.engine.visible_labels())

        self.engine.refresh()
        self.assertIn("added.txt", self.engine.visible_labels())

    def test_expand_then_collapse_restores_listing(self) -> None:
        self.engine.enter(self.root / "src")

        self.engine.expand()
        self.assertEqual(self.engine.visible_labels(), ["..", "lib.rs", "module.rs", "nested/deep"])
        self.engine.expand()
        self.assertEqual(
            self.engine.visible_labels(), ["..", "lib.rs", "module.rs", "nested/deep/file.txt"]
        )

        self.engine.collapse()
        self.assertEqual(self.engine.visible_labels(), ["..", "lib.rs", "module.rs", "nested/deep"])
        self.engine.collapse()
        self.assertEqual(self.engine.visible_labels(), NESTED_SRC_NAMES)
        self.assertEqual(self.engine.expand_level, 0)

    def test_collapse_does_not_bring_back_empty_directory(self) -> None:
        self.engine.expand()
        self.engine.collapse()

        self.assertEqual(self.engine.visible_labels(), ["..", ".gitkeep", "README.md", "main.rs", "src"])

        self.engine.refresh()
        self.assertEqual(self.engine.visible_labels(), NESTED_ROOT_NAMES)

    def test_collapse_at_level_zero_is_a_no_op(self) -> None:
        before = list(self.engine.selected)
        self.engine.collapse()
        self.assertEqual(self.engine.selected, before)
        self.assertEqual(self.engine.expand_level, 0)

    def test_expand_does_not_cache_subdirectories(self) -> None:
        self.engine.expand()
        self.assertEqual(self.engine.history(), [self.root])

    def test_filter_survives_expand(self) -> None:
        self.engine.enter(self.root / "src")
        self.engine.update("deep")
        self.assertEqual(self.engine.selected, [])

        self.engine.expand()

        self.assertEqual(self.engine.visible_labels(), ["nested/deep"])
        self.assertEqual(self.engine.filter, "deep")

    def test_expand_drops_directory_removed_from_disk(self) -> None:
        self.engine.enter(self.root / "src")
        shutil.rmtree(self.root / "src" / "nested")

        self.engine.expand()

        self.assertEqual(self.engine.visible_labels(), ["..", "lib.rs", "module.rs"])

    def test_missing_directory_is_not_cached(self) -> None:
        with self.assertRaises(FsReadError):
            self.engine.load_or_get(self.root / "missing")
        self.assertEqual(self.engine.history(), [self.root])

    def test_enter_file_raises_path_error(self) -> None:
        with self.assertRaises(PathError):
            self.engine.enter(self.root / "main.rs")
        self.assertEqual(self.engine.current_directory, self.root)

    def test_submit_resolves_parent_shortcut(self) -> None:
        self.engine.enter(self.root / "src")
        self.assertEqual(self.engine.submit(0), self.root)

    def test_submit_stale_row_raises(self) -> None:
        (self.root / "main.rs").unlink()
        index = self.engine.visible_labels().index("main.rs")
        with self.assertRaises(PathError):
            self.engine.submit(index)

    def test_drop_invalid_folder_requires_history_mode(self) -> None:
        with self.assertRaises(StateError):
            self.engine.drop_invalid_folder(0)

    def test_refresh_keeps_filter_and_resets_expansion(self) -> None:
        self.engine.update("rs")
        self.engine.expand()
        self.engine.refresh()

        self.assertEqual(self.engine.expand_level, 0)
        self.assertEqual(self.engine.filter, "rs")
        self.assertEqual(self.engine.visible_labels(), ["main.rs"])

    def test_delete_file(self) -> None:
        index = self.engine.visible_labels().index("main.rs")

        self.assertTrue(self.engine.delete(index))

        self.assertFalse((self.root / "main.rs").exists())
        self.assertNotIn("main.rs", self.engine.visible_labels())

    def test_delete_directory_tree(self) -> None:
        index = self.engine.visible_labels().index("src")

        self.assertTrue(self.engine.delete(index))

        self.assertFalse((self.root / "src").exists())
        self.assertNotIn("src", self.engine.visible_labels())

    def test_delete_failure_keeps_row_and_cache(self) -> None:
        index = self.engine.visible_labels().index("main.rs")

        with mock.patch.object(Path, "unlink", side_effect=PermissionError("denied")):
            self.assertFalse(self.engine.delete(index))

        self.assertTrue((self.root / "main.rs").exists())
        self.assertIn("main.rs", self.engine.visible_labels())
        self.assertEqual(self.engine.history(), [self.root])

    def test_delete_directory_failure_is_reported(self) -> None:
        index = self.engine.visible_labels().index("src")

        with mock.patch("foldview.navigation.engine.shutil.rmtree", side_effect=PermissionError("denied")):
            self.assertFalse(self.engine.delete(index))

        self.assertIn("src", self.engine.visible_labels())
        self.assertEqual(self.engine.history(), [self.root])

    def test_delete_refuses_parent_shortcut(self) -> None:
        self.assertFalse(self.engine.delete(0))
        self.assertTrue(self.root.exists())
        self.assertEqual(self.engine.visible_labels(), NESTED_ROOT_NAMES)

    def test_peek_without_cached_directory_raises(self) -> None:
        self.engine.cache.clear()
        with self.assertRaises(CacheError):
            self.engine.peek()


class CanonicalDirectoryTests(unittest.TestCase):
    def test_resolves_symlinked_directory(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "real").mkdir()
            (root / "link").symlink_to(root / "real")
            self.assertEqual(canonical_directory(root / "link"), root / "real")

    def test_rejects_files_and_missing_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "f.txt").write_text("x", encoding="utf-8")
            with self.assertRaises(PathError):
                canonical_directory(root / "f.txt")
            with self.assertRaises(PathError):
                canonical_directory(root / "missing")


if __name__ == "__main__":
    unittest.main()
