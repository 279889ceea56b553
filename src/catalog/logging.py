"""Console logging for the catalog CLI.

Library modules only create loggers; handlers are attached here, once,
by the command-line entry point.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

PROJECT_PREFIX = "catalog"


def configure_logging(level: int = logging.WARNING) -> RichHandler:
    """Attach a Rich console handler on stderr to the ``catalog`` logger.

    Calling it again replaces the previous handler instead of stacking a
    second one.
    """
    debug_mode = level <= logging.DEBUG

    handler = RichHandler(
        level=level,
        console=Console(stderr=True),
        show_time=debug_mode,
        show_path=debug_mode,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger(PROJECT_PREFIX)
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
