import logging

import pytest

import logger_config


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the root logger and the setup flag around every test."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    logger_config._LOGGING_INITIALIZED = False
    yield
    logger_config._LOGGING_INITIALIZED = False
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
