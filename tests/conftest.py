from __future__ import annotations

import io
import os
from collections.abc import Callable
from pathlib import Path

import pytest

from filemanager.service.fs_service import FilesystemFacade

# Root bypasses permission bits, so permission tests are meaningless there.
running_as_root = hasattr(os, "geteuid") and os.geteuid() == 0


@pytest.fixture
def facade() -> FilesystemFacade:
    return FilesystemFacade()


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """t/ with a.txt, b.log and sub/c.txt."""
    root = tmp_path / "t"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("a")
    (root / "b.log").write_text("b")
    (root / "sub" / "c.txt").write_text("c")
    return root


def scripted(*lines: str) -> Callable[[], str]:
    """An input function that replays `lines`, then behaves like a closed stdin."""
    pending = list(lines)

    def read() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read


@pytest.fixture
def out() -> io.StringIO:
    return io.StringIO()
