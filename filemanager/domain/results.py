from __future__ import annotations

from pydantic import BaseModel, Field

from .status import StatusCode

__all__ = ["OperationResult"]


class OperationResult(BaseModel):
    """Outcome of a single facade call.

    `paths` is only populated by listing and search; every other operation
    returns a bare status.
    """

    status: StatusCode
    paths: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status is StatusCode.success
