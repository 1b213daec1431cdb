"""File viewer content: reading, sanitizing, and highlighting files."""

from __future__ import annotations

from .syntax import DEFAULT_STYLE, colorize_source, normalize_style, read_text, sanitize_terminal_text
from .text import MAX_FILE_BYTES, FileTextInfo, load_file_text_info, text_dimensions

__all__ = [
    "DEFAULT_STYLE",
    "MAX_FILE_BYTES",
    "FileTextInfo",
    "colorize_source",
    "load_file_text_info",
    "normalize_style",
    "read_text",
    "sanitize_terminal_text",
    "text_dimensions",
]
