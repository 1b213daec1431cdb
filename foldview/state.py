"""Input/view mode state machine with one level of restore.

Two independent dimensions decide how keys are handled and what is drawn:

    [NORMAL+SEARCH] <---> [EDIT+SEARCH]
          |                    |
          v                    v
    [NORMAL+FILE_VIEW]   [EDIT+HISTORY_FOLDER_VIEW]

Every transition remembers the pair it left so the file viewer can return to
whichever search mode opened it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class InputMode(Enum):
    NORMAL = "normal"
    EDIT = "edit"


class ViewMode(Enum):
    SEARCH = "search"
    FILE_VIEW = "file_view"
    HISTORY_FOLDER_VIEW = "history_folder_view"


@dataclass
class NavigationState:
    input_mode: InputMode = InputMode.EDIT
    view_mode: ViewMode = ViewMode.SEARCH
    prev_input_mode: InputMode = InputMode.EDIT
    prev_view_mode: ViewMode = ViewMode.SEARCH

    def _transition(self, input_mode: InputMode, view_mode: ViewMode) -> None:
        self.prev_input_mode = self.input_mode
        self.prev_view_mode = self.view_mode
        self.input_mode = input_mode
        self.view_mode = view_mode

    def to_search(self) -> None:
        """Browse the current directory with navigation keys."""
        self._transition(InputMode.NORMAL, ViewMode.SEARCH)

    def to_search_edit(self) -> None:
        """Type a filter query for the current directory."""
        self._transition(InputMode.EDIT, ViewMode.SEARCH)

    def to_history_search(self) -> None:
        """Type a filter query over previously visited directories."""
        self._transition(InputMode.EDIT, ViewMode.HISTORY_FOLDER_VIEW)

    def to_file_view(self) -> None:
        self._transition(InputMode.NORMAL, ViewMode.FILE_VIEW)

    def restore_previous_state(self) -> None:
        """Go back to the pair active before the last transition.

        This does not record a new previous pair, so calling it twice in a row
        leaves the state where the first call put it.
        """
        self.input_mode = self.prev_input_mode
        self.view_mode = self.prev_view_mode

    def is_edit(self) -> bool:
        return self.input_mode is InputMode.EDIT

    def is_history_search(self) -> bool:
        return self.view_mode is ViewMode.HISTORY_FOLDER_VIEW

    def is_file_view(self) -> bool:
        return self.view_mode is ViewMode.FILE_VIEW

    @property
    def mode(self) -> tuple[InputMode, ViewMode]:
        return self.input_mode, self.view_mode


__all__ = [
    "InputMode",
    "ViewMode",
    "NavigationState",
]
