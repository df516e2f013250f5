"""
Structured logging setup.

structlog is configured once, on first import of this module, to render
JSON through the standard library logging machinery. Library modules only
call get_logger(); the host application may call configure_logging() to
pick a level and attach a stream handler.
"""

import logging
import sys
from typing import IO, Optional, Union

import structlog


structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.processors.JSONRenderer()
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

_handler: Optional[logging.Handler] = None


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: IO[str] = sys.stderr,
) -> logging.Handler:
    """Send expense_tracker logs to stream, replacing an earlier handler."""
    global _handler

    root = logging.getLogger("expense_tracker")
    root.setLevel(level)
    if _handler is not None:
        root.removeHandler(_handler)

    _handler = logging.StreamHandler(stream)
    _handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(_handler)
    return _handler


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
