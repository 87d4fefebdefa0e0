from __future__ import annotations

import os
import sys

__all__ = [
    "name_matches",
    "child_path",
    "display_path",
]


def name_matches(name: str, substring: str) -> bool:
    """Literal, case-sensitive containment test on a bare filename.

    The empty substring matches every name.
    """
    return substring in name


def child_path(parent: str, name: str) -> str:
    """Join a directory entry onto its parent, keeping the parent's form.

    A relative parent yields a relative child and an absolute parent an
    absolute one; no normalization is applied.
    """
    return os.path.join(parent, name)


def display_path(path: str) -> str:
    """Printable form of a path returned by the OS.

    Names that aren't valid in the filesystem encoding come back from
    `os.scandir`/`os.walk` holding lone surrogates; those bytes are shown as
    U+FFFD so a strict console stream can write them.
    """
    return os.fsencode(path).decode(sys.getfilesystemencoding(), errors="replace")
