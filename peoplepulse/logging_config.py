"""Logging configuration for the People Pulse engines."""

import logging
import sys
from typing import Optional, Union

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVEL = logging.INFO


def setup_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure application logging.

    Installs a stderr handler on the root logger, keeping stdout free for
    command output, and sets the ``peoplepulse`` hierarchy to the
    requested level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = LOG_LEVEL
    if level is None:
        level = LOG_LEVEL

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    logging.getLogger("peoplepulse").setLevel(level)

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
