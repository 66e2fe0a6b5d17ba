"""
Logging setup for the diagram service.

Every module logs through ``logging.getLogger(__name__)``; this only
configures the ``app`` package logger once at start-up.
"""

import logging
import sys
from typing import Optional, TextIO, Union

_root_logger = logging.getLogger("app")

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(
    level: Union[str, int] = "INFO",
    format: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the ``app`` logger.

    Args:
        level: Log level name (DEBUG, INFO, ...) or int
        format: Custom log format string
        stream: Output stream (defaults to stderr)
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    _root_logger.setLevel(level)
    _root_logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(format or DEFAULT_FORMAT))
    _root_logger.addHandler(handler)

    # Don't double-print through the root logger
    _root_logger.propagate = False
