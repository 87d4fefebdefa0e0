from __future__ import annotations

import argparse

from .config import get_log_file_from_env, get_log_level_from_env


def parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse CLI arguments for the interactive file manager."""
    parser = argparse.ArgumentParser(description="Console file manager")
    parser.add_argument(
        "--log-level",
        default=get_log_level_from_env(),
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        type=str.upper,
    )
    parser.add_argument(
        "--log-file",
        default=get_log_file_from_env(),
        help="Write JSON log lines here instead of stderr.",
    )
    return parser.parse_args(argv)
