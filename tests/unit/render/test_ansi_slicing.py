"""Tests for ANSI-aware width measurement and horizontal slicing."""

from __future__ import annotations

import unittest

from foldview.render.ansi import (
    RESET,
    REVERSE,
    display_width,
    pad_ansi_line,
    reverse_video,
    slice_ansi_line,
    strip_ansi,
)


class DisplayWidthTests(unittest.TestCase):
    def test_escapes_do_not_count(self) -> None:
        self.assertEqual(display_width("\x1b[1mab\x1b[0m"), 2)

    def test_tabs_expand_to_next_stop(self) -> None:
        self.assertEqual(display_width("a\tb"), 9)

    def test_wide_characters_take_two_columns(self) -> None:
        self.assertEqual(display_width("日本"), 4)


class SliceAnsiLineTests(unittest.TestCase):
    def test_replays_color_active_before_viewport(self) -> None:
        line = "\x1b[31mabcdef\x1b[0m"
        self.assertEqual(slice_ansi_line(line, 2, 3), "\x1b[31mcde")

    def test_zero_offset_keeps_leading_escape(self) -> None:
        line = "\x1b[31mabc"
        self.assertEqual(slice_ansi_line(line, 0, 2), "\x1b[31mab")

    def test_offset_past_end_is_empty(self) -> None:
        self.assertEqual(strip_ansi(slice_ansi_line("abc", 10, 5)), "")

    def test_tab_becomes_spaces(self) -> None:
        self.assertEqual(slice_ansi_line("\tx", 0, 10), " " * 8 + "x")

    def test_wide_character_cut_by_left_edge_is_blank(self) -> None:
        self.assertEqual(slice_ansi_line("日本", 1, 3), " 本")


class PaddingTests(unittest.TestCase):
    def test_pad_fills_to_width(self) -> None:
        self.assertEqual(pad_ansi_line("abc", 5), "abc  ")

    def test_pad_clips_long_lines(self) -> None:
        self.assertEqual(pad_ansi_line("abcdef", 4), "abcd")

    def test_reverse_video_survives_inner_reset(self) -> None:
        text = reverse_video(f"a{RESET}b")
        self.assertEqual(text, f"{REVERSE}a{RESET}{REVERSE}b{RESET}")


if __name__ == "__main__":
    unittest.main()
