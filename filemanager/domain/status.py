from __future__ import annotations

from enum import Enum

__all__ = [
    "StatusCode",
    "STATUS_MESSAGES",
    "UNKNOWN_STATUS_MESSAGE",
    "describe",
]


class StatusCode(int, Enum):
    """Closed set of outcomes for a filesystem operation.

    Numeric values mirror the codes the tool has always reported; they carry
    no network meaning.
    """

    success = 200
    no_matches = 204
    invalid_request = 400
    not_found = 404
    internal_error = 500


STATUS_MESSAGES: dict[StatusCode, str] = {
    StatusCode.success: "Operation successful",
    StatusCode.no_matches: "no files found",
    StatusCode.invalid_request: "invalid path or resource already exists",
    StatusCode.not_found: "not found",
    StatusCode.internal_error: "system error",
}

UNKNOWN_STATUS_MESSAGE = "unknown status"


def describe(status: StatusCode | int) -> str:
    """Return the human-readable line for a status code.

    Accepts plain ints too; anything outside the closed set maps to
    "unknown status".
    """
    try:
        code = StatusCode(status)
    except ValueError:
        return UNKNOWN_STATUS_MESSAGE
    return STATUS_MESSAGES.get(code, UNKNOWN_STATUS_MESSAGE)
