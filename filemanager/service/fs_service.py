from __future__ import annotations

import os
import shutil

from ..domain.paths import child_path, name_matches
from ..domain.results import OperationResult
from ..domain.status import StatusCode
from ..logging_conf import get_logger

__all__ = ["FilesystemFacade"]

logger = get_logger("service.fs")

# ValueError covers paths the OS layer rejects outright, e.g. embedded NUL.
_FS_ERRORS = (OSError, ValueError)


def _result(status: StatusCode, paths: list[str] | None = None) -> OperationResult:
    return OperationResult(status=status, paths=paths or [])


def _rejected(event: str, path: str, status: StatusCode, reason: str) -> OperationResult:
    logger.info(
        f"fs.{event}.rejected",
        extra={"event": event, "path": path, "status": status.name, "reason": reason},
    )
    return _result(status)


def _failed(event: str, path: str, err: Exception) -> OperationResult:
    logger.warning(
        f"fs.{event}.error",
        extra={
            "event": event,
            "path": path,
            "status": StatusCode.internal_error.name,
            "error": str(err),
        },
    )
    return _result(StatusCode.internal_error)


class FilesystemFacade:
    """Filesystem operations exposed as status-returning calls.

    Holds no state between calls. Every `OSError`, and the `ValueError` raised
    for a path the OS refuses to take, is caught here and reported as
    `internal_error`; nothing is retried.
    """

    def list(self, path: str) -> OperationResult:
        """Immediate children of a directory, joined onto `path`."""
        if not os.path.exists(path):
            return _rejected("list", path, StatusCode.not_found, "path does not exist")
        if not os.path.isdir(path):
            return _rejected("list", path, StatusCode.invalid_request, "not a directory")
        try:
            with os.scandir(path) as it:
                contents = [child_path(path, entry.name) for entry in it]
        except _FS_ERRORS as e:
            return _failed("list", path, e)
        logger.info("fs.list", extra={"event": "list", "path": path, "count": len(contents)})
        return _result(StatusCode.success, contents)

    def create_file(self, path: str) -> OperationResult:
        """Create an empty file, truncating any existing one."""
        try:
            with open(path, "w", encoding="utf-8"):
                pass
        except _FS_ERRORS as e:
            return _failed("create_file", path, e)
        logger.info("fs.create_file", extra={"event": "create_file", "path": path})
        return _result(StatusCode.success)

    def delete_file(self, path: str) -> OperationResult:
        if not os.path.exists(path):
            return _rejected("delete_file", path, StatusCode.not_found, "file does not exist")
        if not os.path.isfile(path):
            return _rejected(
                "delete_file", path, StatusCode.invalid_request, "not a regular file"
            )
        try:
            os.remove(path)
        except _FS_ERRORS as e:
            return _failed("delete_file", path, e)
        logger.info("fs.delete_file", extra={"event": "delete_file", "path": path})
        return _result(StatusCode.success)

    def create_directory(self, path: str) -> OperationResult:
        """Create a single directory; parents are not created."""
        if os.path.exists(path):
            return _rejected(
                "create_directory", path, StatusCode.invalid_request, "path already exists"
            )
        try:
            os.mkdir(path)
        except _FS_ERRORS as e:
            return _failed("create_directory", path, e)
        logger.info("fs.create_directory", extra={"event": "create_directory", "path": path})
        return _result(StatusCode.success)

    def delete_directory(self, path: str) -> OperationResult:
        """Remove a directory and everything under it.

        A symlink to a directory is unlinked; its target is left alone.
        """
        if not os.path.exists(path):
            return _rejected(
                "delete_directory", path, StatusCode.not_found, "directory does not exist"
            )
        if not os.path.isdir(path):
            return _rejected(
                "delete_directory", path, StatusCode.invalid_request, "not a directory"
            )
        try:
            if os.path.islink(path):
                os.unlink(path)
            else:
                shutil.rmtree(path)
        except _FS_ERRORS as e:
            return _failed("delete_directory", path, e)
        logger.info("fs.delete_directory", extra={"event": "delete_directory", "path": path})
        return _result(StatusCode.success)

    def rename(self, old_path: str, new_path: str) -> OperationResult:
        """Rename or move an entry; an existing target is replaced where the OS allows."""
        if not os.path.exists(old_path):
            return _rejected("rename", old_path, StatusCode.not_found, "source does not exist")
        try:
            os.replace(old_path, new_path)
        except _FS_ERRORS as e:
            return _failed("rename", old_path, e)
        logger.info(
            "fs.rename",
            extra={"event": "rename", "path": old_path, "new_path": new_path},
        )
        return _result(StatusCode.success)

    def search(self, path: str, substring: str) -> OperationResult:
        """Recursively collect every entry under `path` whose name contains `substring`.

        - Matching is literal and case-sensitive on the bare name
        - Subdirectories we may not read are skipped, not fatal
        - An unreadable root or any other walk error is an internal error
        - Symlinked directories are reported but not descended into
        """
        if not os.path.exists(path):
            return _rejected("search", path, StatusCode.not_found, "directory does not exist")
        if not os.path.isdir(path):
            return _rejected("search", path, StatusCode.invalid_request, "not a directory")

        def on_error(err: OSError) -> None:
            if isinstance(err, PermissionError) and err.filename != path:
                logger.info(
                    "fs.search.skipped",
                    extra={"event": "search", "path": err.filename, "error": str(err)},
                )
                return
            raise err

        results: list[str] = []
        try:
            for dirpath, dirnames, filenames in os.walk(path, onerror=on_error):
                for name in dirnames + filenames:
                    if name_matches(name, substring):
                        results.append(child_path(dirpath, name))
        except _FS_ERRORS as e:
            return _failed("search", path, e)

        logger.info(
            "fs.search",
            extra={
                "event": "search",
                "path": path,
                "substring": substring,
                "count": len(results),
            },
        )
        if not results:
            return _result(StatusCode.no_matches)
        return _result(StatusCode.success, results)
