"""Range parameters."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import PaginationError, PaginationErrorCode
from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_BOUNDARIES = 2
DEFAULT_OFFSET = 1


class RangeParams(BaseModel):
    """Inputs for one range computation.

    ``current_page`` is deliberately left unchecked: callers supply a page in
    ``[1, pages]`` and anything else is outside the builder's contract.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    current_page: int
    pages: int = Field(ge=1)
    boundaries: int = Field(default=DEFAULT_BOUNDARIES, ge=0)
    offset: int = Field(default=DEFAULT_OFFSET, ge=0)


def parse_params(data: Mapping[str, Any]) -> RangeParams:
    """Validate loosely typed input (query strings, form data) into RangeParams.

    Numeric strings are accepted and coerced.

    Raises:
        PaginationError: INVALID_PARAMETER when a value is missing, not an
            integer, or out of range. ``field`` names the first offending key.
    """
    try:
        return RangeParams.model_validate(dict(data), strict=False)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"])
        logger.warning("pagination_params_rejected", field=field, errors=e.error_count())
        raise PaginationError(
            PaginationErrorCode.INVALID_PARAMETER,
            f"{field}: {first['msg']}",
            field=field,
        ) from e
