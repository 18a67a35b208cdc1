"""Package logging for pathfind.

Every module logger sits under the "pathfind" logger, which owns one stdout
handler. Records also propagate upward so pytest's caplog can see them.

Example:
    >>> from pathfind.logging import enable_debug_logging
    >>> enable_debug_logging()  # search start/result records become visible
"""

import logging
import sys
from typing import Optional

PACKAGE_LOGGER = "pathfind"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_package_handler: Optional[logging.Handler] = None


def setup_root_logger(level: int = logging.INFO) -> logging.Logger:
    """
    Install the stdout handler on the "pathfind" logger.

    Only the first call installs the handler and sets `level`; later calls
    return the already configured logger unchanged.

    Args:
        level: Initial level of the package logger.

    Returns:
        The "pathfind" logger.
    """
    global _package_handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _package_handler is None:
        _package_handler = logging.StreamHandler(sys.stdout)
        _package_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(_package_handler)
        package_logger.setLevel(level)
    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for a pathfind module.

    The logger keeps no level of its own, so it follows the package logger.

    Args:
        name: Module name, usually `__name__`.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def enable_debug_logging() -> None:
    """Let DEBUG records from every pathfind module through."""
    setup_root_logger().setLevel(logging.DEBUG)


def disable_debug_logging() -> None:
    """Return the package logger to INFO."""
    setup_root_logger().setLevel(logging.INFO)


setup_root_logger()
