import logging

import pytest

from pixelforge_utils._core.loggers import UtilsFormatter


@pytest.fixture(autouse=True)
def _clear_own_handlers():
    logger = logging.getLogger()
    logger.handlers[:] = [
        handler for handler in logger.handlers
        if not isinstance(handler, logging.StreamHandler) or
           not isinstance(handler.formatter, UtilsFormatter)
    ]
    original_handlers = logger.handlers[:]
    original_level = logger.level
    yield
    logger.handlers[:] = original_handlers
    logger.setLevel(original_level)


@pytest.fixture(autouse=True)
def _restore_asyncio_logger():
    logger = logging.getLogger('asyncio')
    original_handlers = logger.handlers[:]
    original_propagate = logger.propagate
    yield
    logger.handlers[:] = original_handlers
    logger.propagate = original_propagate
