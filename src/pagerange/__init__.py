"""pagerange: pagination control layout library."""

import logging

from .builder import build_range, serialize_range
from .config import LogSection, PaginationConfig
from .exceptions import PaginationError, PaginationErrorCode
from .items import ButtonItem, EllipsisItem, PageChangeHandler, PageChangeRef, PaginationItem
from .layout import RangeLayout, RangeMetrics, select_layout
from .logger import ROOT_LOGGER, configure_logging, get_logger
from .params import DEFAULT_BOUNDARIES, DEFAULT_OFFSET, RangeParams, parse_params

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())

__all__ = [
    "ButtonItem",
    "DEFAULT_BOUNDARIES",
    "DEFAULT_OFFSET",
    "EllipsisItem",
    "LogSection",
    "PageChangeHandler",
    "PageChangeRef",
    "PaginationConfig",
    "PaginationError",
    "PaginationErrorCode",
    "PaginationItem",
    "RangeLayout",
    "RangeMetrics",
    "RangeParams",
    "build_range",
    "configure_logging",
    "get_logger",
    "parse_params",
    "select_layout",
    "serialize_range",
]
