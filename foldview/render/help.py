"""Per-mode key hints drawn on the bottom row."""

from __future__ import annotations

from ..state import InputMode, ViewMode
from .ansi import BLUE, BOLD, RESET


def _key(text: str) -> str:
    return f"{BOLD}{BLUE}{text}{RESET}"


def _mode(text: str) -> str:
    return f"{BOLD}{text}{RESET}"


HELP_LINES: dict[tuple[InputMode, ViewMode], str] = {
    (InputMode.NORMAL, ViewMode.SEARCH): (
        f"{_mode('Normal')} Switch to {_mode('FileSearch')} {_key('<Tab>')}"
        f" Update {_key('<U>')} Expand {_key('<E>')} Collapse {_key('<C>')}"
        f" Delete {_key('<CTRL+D>')} To Parent {_key('<CTRL+K>')}"
        f" Switch to {_mode('FileSearchHistory')} {_key('<H>')}"
    ),
    (InputMode.EDIT, ViewMode.SEARCH): (
        f"{_mode('FileSearch')} Switch to {_mode('Normal')} {_key('<Tab>')} Clear {_key('<CTRL+U>')}"
    ),
    (InputMode.EDIT, ViewMode.HISTORY_FOLDER_VIEW): (
        f"{_mode('FileSearchHistory')} Switch to {_mode('Normal')} {_key('<Tab>')} Clear {_key('<CTRL+U>')}"
    ),
    (InputMode.NORMAL, ViewMode.FILE_VIEW): (
        f"{_mode('FileView')} Scroll {_key('<H/J/K/L>')} Page {_key('<PgUp/PgDn>')}"
        f" Top {_key('<Home>')} Bottom {_key('<End>')} Quit {_key('<Q>')}"
    ),
}


def help_line(mode: tuple[InputMode, ViewMode]) -> str:
    return HELP_LINES.get(mode, "")


__all__ = [
    "HELP_LINES",
    "help_line",
]
