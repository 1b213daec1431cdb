"""ANSI-aware measurement and horizontal slicing for screen rows.

Escape sequences pass through untouched and never count toward width, so
highlighted file lines can be scrolled sideways without losing their color.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
TAB_STOP = 8
RESET = "\033[0m"
REVERSE = "\033[7m"
BOLD = "\033[1m"
CYAN = "\033[96m"
YELLOW = "\033[33m"
RED = "\033[31m"
BLUE = "\033[94m"


def char_display_width(ch: str, col: int) -> int:
    """Return terminal column width for one character at visual column ``col``.

    Tabs expand to the next 8-column stop, combining marks consume no columns,
    and East Asian wide/fullwidth characters consume two.
    """
    if ch == "\t":
        return TAB_STOP - (col % TAB_STOP)
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE_RE.sub("", text)


def display_width(text: str) -> int:
    col = 0
    for ch in strip_ansi(text):
        col += char_display_width(ch, col)
    return col


def slice_ansi_line(text: str, start_cols: int, max_cols: int) -> str:
    """Return the ``max_cols`` wide viewport of ``text`` starting at ``start_cols``.

    The most recent SGR sequence before the viewport is replayed so the first
    visible character keeps its color. Tabs become spaces.
    """
    if max_cols <= 0 or not text:
        return ""
    start_cols = max(0, start_cols)

    out: list[str] = []
    col = 0
    shown = 0
    idx = 0
    pending_sgr = ""
    replayed = start_cols == 0
    while idx < len(text) and shown < max_cols:
        if text[idx] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, idx)
            if match:
                seq = match.group(0)
                if col >= start_cols:
                    out.append(seq)
                    replayed = True
                elif seq.endswith("m"):
                    pending_sgr = seq
                idx = match.end()
                continue

        ch = text[idx]
        width = char_display_width(ch, col)
        idx += 1
        if col + width <= start_cols:
            col += width
            continue
        if not replayed:
            if pending_sgr:
                out.append(pending_sgr)
            replayed = True
        if ch == "\t" or col < start_cols:
            # Tabs and wide characters cut by the left edge become spaces.
            visible = min(width - max(0, start_cols - col), max_cols - shown)
            out.append(" " * visible)
            shown += visible
            col += width
            continue
        if shown + width > max_cols:
            break
        out.append(ch)
        shown += width
        col += width

    return "".join(out)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns."""
    return slice_ansi_line(text, 0, max_cols)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` and pad it with spaces to exactly ``width``."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))


def reverse_video(text: str) -> str:
    """Wrap ``text`` in reverse video, keeping it reversed across inner resets."""
    return REVERSE + text.replace(RESET, RESET + REVERSE) + RESET


__all__ = [
    "ANSI_ESCAPE_RE",
    "TAB_STOP",
    "RESET",
    "REVERSE",
    "BOLD",
    "CYAN",
    "YELLOW",
    "RED",
    "BLUE",
    "char_display_width",
    "strip_ansi",
    "display_width",
    "slice_ansi_line",
    "clip_ansi_line",
    "pad_ansi_line",
    "reverse_video",
]
