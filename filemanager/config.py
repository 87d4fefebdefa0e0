from __future__ import annotations

import os

__all__ = [
    "DEFAULT_LOG_LEVEL",
    "get_log_level_from_env",
    "get_log_file_from_env",
]

# Quiet by default so log lines don't interleave with the menu.
DEFAULT_LOG_LEVEL = "WARNING"

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def get_log_level_from_env() -> str:
    """Read LOG_LEVEL from environment, defaulting to WARNING."""
    raw = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if raw not in _LEVEL_NAMES:
        raise ValueError(f"LOG_LEVEL must be one of {', '.join(_LEVEL_NAMES)}")
    return raw


def get_log_file_from_env() -> str | None:
    """Read FILEMANAGER_LOG_FILE; unset or blank means log to stderr."""
    val = os.getenv("FILEMANAGER_LOG_FILE", "").strip()
    return val or None
