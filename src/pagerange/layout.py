"""Derived constants and layout case selection."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from .params import RangeParams


class RangeLayout(StrEnum):
    """Which sides of the range are collapsed."""

    FULL = "FULL"
    RIGHT_ELLIPSIS = "RIGHT_ELLIPSIS"
    LEFT_ELLIPSIS = "LEFT_ELLIPSIS"
    BOTH_ELLIPSES = "BOTH_ELLIPSES"


@dataclass(frozen=True)
class RangeMetrics:
    """Thresholds derived from one set of range parameters."""

    # 2 ellipsis slots + current page + boundaries + offsets
    range_length: int
    # first page of the right boundary block
    min_unellipsed_right: int
    # last page shown contiguously from page 1 when only the right side collapses
    right_ellipsis_only_limit: int
    # first page shown contiguously up to the last page when only the left side collapses
    left_ellipsis_only_limit: int

    @classmethod
    def from_params(cls, params: RangeParams) -> RangeMetrics:
        range_length = params.boundaries * 2 + params.offset * 2 + 3
        return cls(
            range_length=range_length,
            min_unellipsed_right=params.pages - params.boundaries + 1,
            right_ellipsis_only_limit=range_length - params.boundaries - 1,
            left_ellipsis_only_limit=params.pages - range_length + params.boundaries + 2,
        )


def select_layout(params: RangeParams, metrics: RangeMetrics | None = None) -> RangeLayout:
    """Pick the layout case. Checks run in order and the first match wins."""
    if metrics is None:
        metrics = RangeMetrics.from_params(params)
    if params.pages <= metrics.range_length:
        return RangeLayout.FULL
    if params.current_page + params.offset <= metrics.right_ellipsis_only_limit:
        return RangeLayout.RIGHT_ELLIPSIS
    if params.current_page - params.offset >= metrics.left_ellipsis_only_limit:
        return RangeLayout.LEFT_ELLIPSIS
    return RangeLayout.BOTH_ELLIPSES
