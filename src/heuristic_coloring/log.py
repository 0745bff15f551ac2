"""Logging setup for command-line entry points.

Library modules only create ``logging.getLogger(__name__)`` loggers; handlers
are installed here, once, by whoever owns the process.
"""

import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(verbose: bool = False, level: Optional[int] = None) -> None:
    """Send package logs to stderr.

    Args:
        verbose: DEBUG level when True, WARNING otherwise.
        level: Explicit level, overrides ``verbose``.
    """
    if level is None:
        level = logging.DEBUG if verbose else logging.WARNING

    package_logger = logging.getLogger("heuristic_coloring")
    package_logger.setLevel(level)
    package_logger.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    package_logger.addHandler(handler)
