import logging

import pytest


@pytest.fixture(autouse=True)
def restore_catalog_logger():
    """Undo any handler or level the CLI attached to the ``catalog`` logger."""
    logger = logging.getLogger("catalog")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)
