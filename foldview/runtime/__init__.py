"""Runtime orchestration for the interactive browser."""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

from ..terminal import TerminalController
from .app import App
from .config import FoldviewConfig
from .loop import run_main_loop


def run_browser(start_directory: Path, config: FoldviewConfig) -> None:
    """Build the application for ``start_directory`` and drive it on the tty."""
    app = App(start_directory, config)
    stdin_fd = sys.stdin.fileno()
    terminal = TerminalController(stdin_fd, sys.stdout.fileno())
    logger.info("browsing {}", app.engine.current_directory)
    with terminal.raw_mode():
        run_main_loop(app, terminal, stdin_fd, config.tick_ms)


__all__ = ["App", "FoldviewConfig", "run_browser", "run_main_loop"]
