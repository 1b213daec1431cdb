"""Loguru sink setup for the interactive session.

The terminal is in raw alternate-screen mode while the browser runs, so log
records go to a rotating file in the user log directory instead of stderr.
"""

from __future__ import annotations

from pathlib import Path

from loguru import logger
from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / f"{APP_NAME}.log"


def setup_logging(level: str = "INFO", log_path: Path | None = None) -> Path | None:
    """Route loguru output to ``log_path`` and drop the default stderr sink.

    Returns the log file in use, or ``None`` when the file sink could not be
    created; logging is then disabled rather than written over the screen.
    """
    target = log_path or default_log_path()
    logger.remove()
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(target),
            level=level.upper(),
            format=LOG_FORMAT,
            rotation="1 MB",
            retention=3,
            encoding="utf-8",
        )
    except (OSError, ValueError):
        return None
    logger.info("logging initialized at level {}", level.upper())
    return target


__all__ = [
    "LOG_FORMAT",
    "default_log_path",
    "setup_logging",
]
