import logging

import pytest


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Drop handlers installed by setup_logging_from_config after each test."""
    root_logger = logging.getLogger()
    before = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers[:]:
        if handler not in before:
            root_logger.removeHandler(handler)
            handler.close()
    for handler in before:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)
