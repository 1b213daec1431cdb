"""Application object: per-mode key handlers around the navigation engine.

Each reachable (input mode, view mode) pair has one handler. Handlers call
engine operations and apply the caller policy for stale selections; any
``AppError`` they raise is caught in ``handle_key``, logged, and shown in the
status line so the loop keeps running.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from ..errors import AppError, CacheError, PathError
from ..fuzzy import wrap_index
from ..navigation import NavigationEngine
from ..source_pane import FileTextInfo, load_file_text_info
from ..state import InputMode, NavigationState, ViewMode
from .config import FoldviewConfig

QUIT_KEYS = frozenset({"CTRL_C", "CTRL_Z"})


@dataclass
class QueryInput:
    """Single-line query buffer edited in EDIT mode."""

    value: str = ""

    def handle_key(self, key: str) -> bool:
        """Apply one key; return whether the value changed."""
        if key == "BACKSPACE":
            if not self.value:
                return False
            self.value = self.value[:-1]
            return True
        if len(key) == 1 and key.isprintable():
            self.value += key
            return True
        return False

    def clear(self) -> None:
        self.value = ""


class App:
    """Interactive browser session: state machine, engine, and viewer state."""

    def __init__(
        self,
        start_directory: Path,
        config: FoldviewConfig | None = None,
        state: NavigationState | None = None,
    ) -> None:
        self.config = config or FoldviewConfig()
        self.state = state or NavigationState()
        self.engine = NavigationEngine(start_directory, self.state, self.config.cache_capacity)
        self.query = QueryInput()
        self.raw_highlight_index = 0
        self.file_opened: Path | None = None
        self.file_text_info: FileTextInfo | None = None
        self.vertical_scroll = 0
        self.horizontal_scroll = 0
        self.status_message = ""
        self.exit = False
        self._handlers: dict[tuple[InputMode, ViewMode], Callable[[str], None]] = {
            (InputMode.NORMAL, ViewMode.SEARCH): self.handle_normal_search_key,
            (InputMode.EDIT, ViewMode.SEARCH): self.handle_edit_search_key,
            (InputMode.EDIT, ViewMode.HISTORY_FOLDER_VIEW): self.handle_edit_history_folder_view_key,
            (InputMode.NORMAL, ViewMode.FILE_VIEW): self.handle_normal_file_view_key,
        }

    # selection

    def reset_index(self) -> None:
        self.raw_highlight_index = 0

    def move_up(self) -> None:
        self.raw_highlight_index -= 1

    def move_down(self) -> None:
        self.raw_highlight_index += 1

    def highlight_index(self) -> int | None:
        """Wrapped highlight row, or ``None`` when nothing is selected."""
        if not self.engine.selected:
            return None
        return wrap_index(self.raw_highlight_index, len(self.engine.selected))

    def update_filter(self, query: str | None) -> None:
        self.engine.update(query)
        self.reset_index()

    def reset(self) -> None:
        """Clear the query, close any open file and go back to row 0."""
        self.query.clear()
        self.engine.update("")
        self.reset_file_view()
        self.reset_index()

    def reset_file_view(self) -> None:
        self.file_opened = None
        self.file_text_info = None
        self.vertical_scroll = 0
        self.horizontal_scroll = 0

    # engine actions

    def submit(self) -> None:
        """Activate the highlighted row: enter a directory or open a file.

        A stale row is evicted from the cache in history mode; in browse mode
        the current directory is re-read instead.
        """
        index = self.highlight_index()
        if index is None:
            return

        try:
            target = self.engine.submit(index)
        except PathError as exc:
            logger.info("selected entry is stale: {}", exc)
            if self.state.is_history_search():
                self.engine.drop_invalid_folder(index)
            else:
                self.engine.refresh()
            return

        if target.is_dir():
            if self.state.is_history_search():
                # Load before leaving history so a failed read keeps the view.
                self.engine.load_or_get(target)
                self.state.to_search()
            self.engine.enter(target)
            self.reset_index()
            return

        self.file_text_info = load_file_text_info(
            target,
            style=self.config.style,
            no_color=self.config.no_color,
            max_bytes=self.config.max_file_bytes,
        )
        self.file_opened = target
        self.vertical_scroll = 0
        self.horizontal_scroll = 0
        self.state.to_file_view()

    def to_parent(self) -> None:
        """Clear the filter and submit the ``..`` shortcut when there is one."""
        self.reset_index()
        self.query.clear()
        self.engine.update("")
        selected = self.engine.selected
        if selected and selected[0].is_parent_shortcut:
            self.submit()

    def delete(self) -> None:
        index = self.highlight_index()
        if index is None:
            return
        label = self.engine.display_label(self.engine.selected[index])
        if not self.engine.delete(index):
            self.status_message = f"Could not delete {label}"

    def _clear_query_after_submit(self) -> None:
        if self.state.is_file_view():
            return
        self.query.clear()
        if self.engine.filter:
            self.engine.update("")

    # key handlers

    def handle_key(self, key: str) -> None:
        """Dispatch one key token to the handler of the current mode."""
        if key in QUIT_KEYS:
            self.exit = True
            return
        handler = self._handlers.get(self.state.mode)
        if handler is None:
            logger.error("no key handler for mode {}", self.state.mode)
            return
        self.status_message = ""
        try:
            handler(key)
        except CacheError as exc:
            logger.error("cache invariant broken: {}", exc)
            self.status_message = str(exc)
        except AppError as exc:
            logger.warning("{} failed: {}", key, exc)
            self.status_message = str(exc)

    def handle_normal_search_key(self, key: str) -> None:
        if key == "u":
            self.engine.refresh()
        elif key == "h":
            self.state.to_history_search()
            self.reset()
        elif key == "e":
            self.engine.expand()
        elif key == "c":
            self.engine.collapse()
        elif key == "TAB":
            self.state.to_search_edit()
        elif key in {"k", "UP"}:
            self.move_up()
        elif key == "CTRL_K":
            self.to_parent()
        elif key in {"j", "DOWN"}:
            self.move_down()
        elif key == "ENTER":
            self.submit()
            self._clear_query_after_submit()
        elif key == "CTRL_D":
            self.delete()

    def handle_edit_search_key(self, key: str) -> None:
        if key == "TAB":
            self.state.to_search()
        elif key == "UP":
            self.move_up()
        elif key == "DOWN":
            self.move_down()
        elif key == "ENTER":
            self.submit()
            self._clear_query_after_submit()
        elif key == "CTRL_U":
            self.query.clear()
            self.update_filter("")
        elif self.query.handle_key(key):
            self.update_filter(self.query.value)

    def handle_edit_history_folder_view_key(self, key: str) -> None:
        if key == "TAB":
            self.state.to_search()
            self.query.clear()
            self.update_filter("")
        elif key == "UP":
            self.move_up()
        elif key == "DOWN":
            self.move_down()
        elif key == "ENTER":
            self.submit()
            self._clear_query_after_submit()
        elif key == "CTRL_U":
            self.query.clear()
            self.update_filter("")
        elif self.query.handle_key(key):
            self.update_filter(self.query.value)

    def handle_normal_file_view_key(self, key: str) -> None:
        info = self.file_text_info
        if info is None:
            raise PathError("no file is open")
        page = self.config.page_rows
        if key == "q":
            self.reset_file_view()
            self.state.restore_previous_state()
        elif key in {"j", "DOWN"}:
            self.vertical_scroll = min(self.vertical_scroll + 1, info.n_rows)
        elif key in {"k", "UP"}:
            self.vertical_scroll = max(self.vertical_scroll - 1, 0)
        elif key in {"h", "LEFT"}:
            self.horizontal_scroll = max(self.horizontal_scroll - 1, 0)
        elif key in {"l", "RIGHT"}:
            self.horizontal_scroll = min(self.horizontal_scroll + 1, info.max_line_length)
        elif key == "HOME":
            self.vertical_scroll = 0
            self.horizontal_scroll = 0
        elif key == "END":
            self.vertical_scroll = max(info.n_rows - page, 0)
        elif key == "PAGE_DOWN":
            self.vertical_scroll = min(self.vertical_scroll + page, info.n_rows)
        elif key == "PAGE_UP":
            self.vertical_scroll = max(self.vertical_scroll - page, 0)


__all__ = [
    "QUIT_KEYS",
    "QueryInput",
    "App",
]
