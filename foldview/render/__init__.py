"""Frame rendering for the browser.

``build_frame`` is a pure function from application state and terminal size
to a list of screen rows; the runtime loop only writes them out. Layout from
top to bottom: a titled list (or file) view, a bordered query box, the status
message, and the key hints of the current mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..errors import AppError
from ..file_tree_model import Entry
from .ansi import CYAN, RED, RESET, YELLOW, BOLD, pad_ansi_line, reverse_video, slice_ansi_line
from .help import help_line

if TYPE_CHECKING:
    from ..runtime.app import App

INPUT_BOX_ROWS = 3
FOOTER_ROWS = 2
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def list_window_start(highlight: int, total: int, rows: int) -> int:
    """First visible row index that keeps ``highlight`` on screen."""
    if rows <= 0 or total <= rows:
        return 0
    return min(max(0, highlight - rows + 1), total - rows)


def _entry_label(app: App, entry: Entry) -> str:
    try:
        return app.engine.display_label(entry)
    except AppError:
        return str(entry.full_path)


def _list_title(app: App) -> str:
    if app.state.is_history_search():
        return f"History: {len(app.engine.selected)} items"
    title = str(app.engine.current_directory)
    try:
        loaded_at = app.engine.peek().loaded_at
    except AppError:
        return title
    return f"{title}  {loaded_at.strftime(TIMESTAMP_FORMAT)}"


def render_list_view(app: App, width: int, rows: int) -> list[str]:
    """Title row plus the windowed ``selected`` list with the highlight reversed."""
    out = [f"{BOLD}{_list_title(app)}{RESET}"]
    body_rows = rows - 1
    selected = app.engine.selected
    highlight = app.highlight_index()
    if highlight is None:
        if body_rows > 0:
            out.append("(no matches)")
        return out

    start = list_window_start(highlight, len(selected), body_rows)
    for index in range(start, min(len(selected), start + body_rows)):
        entry = selected[index]
        label = _entry_label(app, entry)
        text = label if entry.is_file else f"{CYAN}{label}{RESET}"
        if index == highlight:
            text = reverse_video(pad_ansi_line(text, width))
        out.append(text)
    return out


def render_file_view(app: App, width: int, rows: int) -> list[str]:
    """Title row plus the scrolled window of highlighted file lines."""
    info = app.file_text_info
    if info is None:
        return ["(no file open)"]
    position = min(app.vertical_scroll + 1, max(1, info.n_rows))
    out = [f"{BOLD}{info.path}{RESET}  {position}/{info.n_rows}"]
    visible = info.lines[app.vertical_scroll : app.vertical_scroll + max(0, rows - 1)]
    for line in visible:
        out.append(slice_ansi_line(line, app.horizontal_scroll, width) + RESET)
    return out


def render_input_box(app: App, width: int) -> list[str]:
    inner = max(0, width - 2)
    value = app.query.value
    editing = app.state.is_edit()
    if editing:
        value += "█"
    if len(value) > inner:
        value = value[len(value) - inner :]
    body = f"{YELLOW}{value}{RESET}" if editing else value
    title = " Input "
    top = "┌" + title[:inner] + "─" * max(0, inner - len(title)) + "┐"
    middle = "│" + pad_ansi_line(body, inner) + "│"
    bottom = "└" + "─" * inner + "┘"
    return [top, middle, bottom]


def build_frame(app: App, columns: int, rows: int) -> list[str]:
    """Render exactly ``rows`` rows, each padded to ``columns`` cells."""
    width = max(1, columns)
    view_rows = max(1, rows - INPUT_BOX_ROWS - FOOTER_ROWS)
    if app.state.is_file_view():
        view = render_file_view(app, width, view_rows)
    else:
        view = render_list_view(app, width, view_rows)
    view = view[:view_rows] + [""] * max(0, view_rows - len(view))

    status = f"{RED}{app.status_message}{RESET}" if app.status_message else ""
    frame = view + render_input_box(app, width) + [status, help_line(app.state.mode)]
    return [pad_ansi_line(row, width) for row in frame[: max(1, rows)]]


__all__ = [
    "list_window_start",
    "render_list_view",
    "render_file_view",
    "render_input_box",
    "build_frame",
]
