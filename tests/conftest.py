"""Shared fixtures."""

import logging
from typing import Generator

import pytest

from pagerange.logger import ROOT_LOGGER


@pytest.fixture
def restore_logging() -> Generator[None, None, None]:
    """Undo handlers and level set by configure_logging."""
    logger = logging.getLogger(ROOT_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
    logger.setLevel(level)
