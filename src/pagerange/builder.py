"""Range builder."""

from __future__ import annotations

from typing import Any

from .items import ButtonItem, EllipsisItem, PageChangeHandler, PageChangeRef, PaginationItem
from .layout import RangeLayout, RangeMetrics, select_layout
from .logger import get_logger
from .params import RangeParams

logger = get_logger(__name__)


def build_range(
    params: RangeParams,
    on_page_change: PageChangeHandler | None = None,
) -> list[PaginationItem]:
    """Build the ordered list of buttons and ellipses for one pager.

    Args:
        params: current page, page count and shaping parameters
        on_page_change: called with the chosen page when an item is selected.
            Pass a PageChangeRef to swap the handler after the items exist.

    Returns:
        Items in display order. Every page in ``1..pages`` appears exactly once,
        either as a ButtonItem or inside one EllipsisItem's range.
    """
    notify = on_page_change if on_page_change is not None else PageChangeRef()
    metrics = RangeMetrics.from_params(params)
    layout = select_layout(params, metrics)

    def buttons(first: int, last: int) -> list[PaginationItem]:
        return [ButtonItem(value=page, on_page_change=notify) for page in range(first, last + 1)]

    def ellipsis(first: int, last: int) -> EllipsisItem:
        # an empty run still occupies its slot
        return EllipsisItem(ellipsed_range=tuple(range(first, last + 1)), on_page_change=notify)

    pages = params.pages
    items: list[PaginationItem]
    if layout is RangeLayout.FULL:
        items = buttons(1, pages)
    elif layout is RangeLayout.RIGHT_ELLIPSIS:
        limit = metrics.right_ellipsis_only_limit
        items = [
            *buttons(1, limit),
            ellipsis(limit + 1, metrics.min_unellipsed_right - 1),
            *buttons(metrics.min_unellipsed_right, pages),
        ]
    elif layout is RangeLayout.LEFT_ELLIPSIS:
        limit = metrics.left_ellipsis_only_limit
        items = [
            *buttons(1, params.boundaries),
            ellipsis(params.boundaries + 1, limit - 1),
            *buttons(limit, pages),
        ]
    else:
        low = params.current_page - params.offset
        high = params.current_page + params.offset
        items = [
            *buttons(1, params.boundaries),
            ellipsis(params.boundaries + 1, low - 1),
            *buttons(low, high),
            ellipsis(high + 1, metrics.min_unellipsed_right - 1),
            *buttons(metrics.min_unellipsed_right, pages),
        ]

    logger.debug(
        "pagination_range_built",
        layout=layout.value,
        current_page=params.current_page,
        pages=pages,
        items=len(items),
    )
    return items


def serialize_range(items: list[PaginationItem]) -> list[dict[str, Any]]:
    """Convert built items to their tagged JSON shape."""
    return [item.as_dict() for item in items]
