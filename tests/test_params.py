"""range parameter unit tests."""

import pytest
from pydantic import ValidationError

from pagerange import (
    DEFAULT_BOUNDARIES,
    DEFAULT_OFFSET,
    PaginationError,
    PaginationErrorCode,
    RangeParams,
    parse_params,
)


def test_range_params_defaults() -> None:
    params = RangeParams(current_page=1, pages=10)
    assert params.boundaries == DEFAULT_BOUNDARIES == 2
    assert params.offset == DEFAULT_OFFSET == 1


def test_range_params_frozen() -> None:
    params = RangeParams(current_page=1, pages=10)
    with pytest.raises(ValidationError):
        params.pages = 20  # type: ignore[misc]


def test_range_params_zero_pages() -> None:
    with pytest.raises(ValidationError):
        RangeParams(current_page=1, pages=0)


def test_range_params_negative_boundaries() -> None:
    with pytest.raises(ValidationError):
        RangeParams(current_page=1, pages=10, boundaries=-1)


def test_range_params_negative_offset() -> None:
    with pytest.raises(ValidationError):
        RangeParams(current_page=1, pages=10, offset=-1)


def test_range_params_rejects_text() -> None:
    with pytest.raises(ValidationError):
        RangeParams(current_page=1, pages="10")  # type: ignore[arg-type]


def test_range_params_current_page_not_checked() -> None:
    params = RangeParams(current_page=99, pages=10)
    assert params.current_page == 99


def test_parse_params_coerces_text() -> None:
    params = parse_params({"current_page": "3", "pages": "40", "offset": "2"})
    assert params == RangeParams(current_page=3, pages=40, boundaries=2, offset=2)


def test_parse_params_missing_pages() -> None:
    with pytest.raises(PaginationError) as exc_info:
        parse_params({"current_page": 1})
    assert exc_info.value.code == PaginationErrorCode.INVALID_PARAMETER
    assert isinstance(exc_info.value.__cause__, ValidationError)
    assert exc_info.value.field == "pages"


def test_parse_params_out_of_range() -> None:
    with pytest.raises(PaginationError) as exc_info:
        parse_params({"current_page": 1, "pages": 10, "boundaries": -2})
    assert exc_info.value.code == PaginationErrorCode.INVALID_PARAMETER
    assert exc_info.value.field == "boundaries"


def test_parse_params_not_an_integer() -> None:
    with pytest.raises(PaginationError) as exc_info:
        parse_params({"current_page": "first", "pages": 10})
    assert str(exc_info.value).startswith("INVALID_PARAMETER: ")
