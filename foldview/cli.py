"""Command-line front door for foldview.

Parses CLI options, merges them over the JSON config, resolves the starting
directory, and hands off to the interactive runtime.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .errors import AppError
from .runtime import run_browser
from .runtime.config import FoldviewConfig, load_foldview_config
from .runtime.logging import setup_logging

BYTES_PER_MIB = 1024 * 1024


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="foldview",
        description="Fuzzy-filter, flatten and browse directories in the terminal.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory to start in. Defaults to current directory.")
    parser.add_argument("--style", default=None, help="Pygments style name for file highlighting.")
    parser.add_argument("--no-color", action="store_true", help="Show files without syntax highlighting.")
    parser.add_argument("--cache-size", type=_positive_int, default=None, help="Number of directories kept in history.")
    parser.add_argument("--max-file-mb", type=_positive_int, default=None, help="Largest file size that can be opened.")
    parser.add_argument("--log-level", default=None, help="Log level for the session log file.")
    parser.add_argument("--config", type=Path, default=None, help="Read settings from this JSON file.")
    return parser


def resolve_config(args: argparse.Namespace) -> FoldviewConfig:
    """Apply CLI flags over the values read from the config file."""
    config = load_foldview_config(args.config)
    return config.with_overrides(
        style=args.style,
        no_color=True if args.no_color else None,
        cache_capacity=args.cache_size,
        max_file_bytes=args.max_file_mb * BYTES_PER_MIB if args.max_file_mb is not None else None,
        log_level=args.log_level,
    )


def resolve_start_directory(path: Path) -> Path:
    """Return ``path`` itself for directories and the containing directory for files."""
    if not path.exists():
        raise SystemExit(f"Path not found: {path}")
    if path.is_dir():
        return path
    return path.resolve().parent


def main(argv: list[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and launch the browser.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used.
    """
    args = build_parser().parse_args(argv)
    config = resolve_config(args)
    setup_logging(config.log_level)

    if default_path is None:
        default_path = Path.cwd()
    start_directory = resolve_start_directory(Path(args.path or default_path))
    try:
        run_browser(start_directory, config)
    except AppError as exc:
        raise SystemExit(str(exc)) from exc
