"""Pagination exceptions."""

from __future__ import annotations

from enum import Enum


class PaginationErrorCode(str, Enum):
    """Pagination error codes."""

    INVALID_PARAMETER = "INVALID_PARAMETER"
    INVALID_SELECTION = "INVALID_SELECTION"


class PaginationError(ValueError):
    """Raised when pager input cannot be turned into page numbers."""

    def __init__(
        self,
        code: PaginationErrorCode,
        message: str,
        *,
        field: str | None = None,
    ) -> None:
        super().__init__(f"{code.value}: {message}")
        self.code = code
        self.message = message
        self.field = field
