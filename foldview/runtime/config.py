"""JSON config loading for browser defaults.

Reads cache capacity, file-size cap, highlight style and loop timing from the
user config directory. All access is defensive: a missing or malformed file,
or a value of the wrong type, falls back to the built-in default for that key.
Nothing is written back; the browser keeps no state across restarts.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path

from loguru import logger
from platformdirs import user_config_dir

from ..navigation import DEFAULT_CACHE_CAPACITY
from ..source_pane import DEFAULT_STYLE, MAX_FILE_BYTES

APP_NAME = "foldview"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class FoldviewConfig:
    cache_capacity: int = DEFAULT_CACHE_CAPACITY
    max_file_bytes: int = MAX_FILE_BYTES
    style: str = DEFAULT_STYLE
    no_color: bool = False
    tick_ms: int = 200
    page_rows: int = 30
    log_level: str = "INFO"

    def with_overrides(self, **overrides: object) -> FoldviewConfig:
        """Return a copy with every non-``None`` override applied."""
        return replace(self, **{key: value for key, value in overrides.items() if value is not None})


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the raw JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = path or CONFIG_PATH
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config {}: {}", config_path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def _coerce(default: object, value: object) -> object:
    """Validate one raw JSON value against the type of its default."""
    if isinstance(default, bool):
        return value if isinstance(value, bool) else default
    if isinstance(default, int):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            return default
        return value
    if isinstance(default, str):
        return value if isinstance(value, str) and value else default
    return default


def load_foldview_config(path: Path | None = None) -> FoldviewConfig:
    """Build a ``FoldviewConfig`` from the JSON file, key by key."""
    raw = load_config(path)
    defaults = FoldviewConfig()
    values: dict[str, object] = {}
    for item in fields(FoldviewConfig):
        if item.name not in raw:
            continue
        default = getattr(defaults, item.name)
        coerced = _coerce(default, raw[item.name])
        if coerced != raw[item.name]:
            logger.warning("ignoring invalid config value {}={!r}", item.name, raw[item.name])
        values[item.name] = coerced
    return replace(defaults, **values)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "FoldviewConfig",
    "load_config",
    "load_foldview_config",
]
