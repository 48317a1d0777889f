"""structlog loggers routed through the standard library ``pagerange`` logger.

Nothing is emitted until the host application attaches a handler, either its
own or the one installed by ``configure_logging``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO, Any

import structlog

ROOT_LOGGER = "pagerange"
_HANDLER_NAME = "pagerange-structlog"

_PROCESSORS: list[structlog.types.Processor] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def get_logger(name: str) -> Any:
    """Return a lazily bound structlog logger over ``logging.getLogger(name)``.

    The result is structlog's lazy proxy; it binds to a
    ``structlog.stdlib.BoundLogger`` on first use.
    """
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
    )


def configure_logging(
    level: str = "INFO",
    format: str = "json",
    stream: IO[str] | None = None,
) -> logging.Logger:
    """Attach a structlog-rendering handler to the ``pagerange`` logger.

    Calling it again replaces the handler installed by the previous call.

    Args:
        level: "DEBUG", "INFO", "WARNING", "ERROR" or "CRITICAL"
        format: "json" or "text"
        stream: destination, stdout when omitted

    Returns:
        the configured ``pagerange`` stdlib logger
    """
    renderer: structlog.types.Processor
    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    logger = logging.getLogger(ROOT_LOGGER)
    for existing in [h for h in logger.handlers if h.get_name() == _HANDLER_NAME]:
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return logger
