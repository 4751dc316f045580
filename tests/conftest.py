import logging

import pytest

from calculator_pkg.logging_config import LOGGER_NAME
from calculator_pkg.tokenizer import clear_caches


@pytest.fixture(autouse=True)
def _reset_state():
    """Drop handlers bound to captured streams and memoised tokens between tests."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    clear_caches()
