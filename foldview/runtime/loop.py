"""Main interactive event loop.

Renders a frame, waits up to one tick for a key, and dispatches it. Engine
work runs inline between polls, so a slow directory read simply delays the
next frame.
"""

from __future__ import annotations

from collections.abc import Callable

from ..input import read_key
from ..render import build_frame
from ..terminal import TerminalController
from .app import App


def run_main_loop(
    app: App,
    terminal: TerminalController,
    stdin_fd: int,
    tick_ms: int,
    read_key_fn: Callable[[int, int | None], str] = read_key,
) -> None:
    """Run until a quit key sets ``app.exit``."""
    while not app.exit:
        columns, rows = terminal.size()
        terminal.write_frame(build_frame(app, columns, rows))
        key = read_key_fn(stdin_fd, tick_ms)
        if key:
            app.handle_key(key)
