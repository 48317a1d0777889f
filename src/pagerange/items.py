"""Pagination items: the two shapes a renderer receives."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Literal

from .exceptions import PaginationError, PaginationErrorCode
from .logger import get_logger

logger = get_logger(__name__)

PageChangeHandler = Callable[[int], None]


def _noop(page: int) -> None:
    return None


@dataclass
class PageChangeRef:
    """Mutable holder for the page-change callback.

    Every item built in one call keeps a reference to the same holder, so
    assigning ``current`` re-targets items that were already handed out.
    """

    current: PageChangeHandler = _noop

    def __call__(self, page: int) -> None:
        self.current(page)


@dataclass(frozen=True)
class ButtonItem:
    """A single selectable page."""

    value: int
    on_page_change: PageChangeHandler = field(default=_noop, repr=False, compare=False)
    type: Literal["button"] = field(default="button", init=False)

    def go_to_page(self) -> None:
        """Notify the page-change handler with this button's page."""
        logger.debug("pagination_page_selected", page=self.value, source=self.type)
        self.on_page_change(self.value)

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.type, "value": self.value}


@dataclass(frozen=True)
class EllipsisItem:
    """A contiguous run of hidden pages collapsed into one marker.

    ``ellipsed_range`` is empty when the hidden gap is zero pages wide.
    """

    ellipsed_range: tuple[int, ...]
    on_page_change: PageChangeHandler = field(default=_noop, repr=False, compare=False)
    type: Literal["ellipsis"] = field(default="ellipsis", init=False)

    def on_change(self, selected: int | str) -> None:
        """Notify the page-change handler with a page picked from the run.

        ``selected`` may come from a form control as text. Membership in
        ``ellipsed_range`` is not checked.

        Raises:
            PaginationError: ``selected`` is text that is not an integer.
        """
        page = _parse_page(selected)
        logger.debug("pagination_page_selected", page=page, source=self.type)
        self.on_page_change(page)

    def as_dict(self) -> dict[str, Any]:
        return {"type": self.type, "ellipsed_range": list(self.ellipsed_range)}


PaginationItem = ButtonItem | EllipsisItem


def _parse_page(selected: int | str) -> int:
    if isinstance(selected, int):
        return selected
    try:
        return int(selected, 10)
    except (TypeError, ValueError) as e:
        raise PaginationError(
            PaginationErrorCode.INVALID_SELECTION,
            f"Invalid page selection: {selected!r}",
            field="selected",
        ) from e
