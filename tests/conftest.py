import logging

import pytest

from lendmath.logging import logger


@pytest.fixture(scope="session", autouse=True)
def _set_lendmath_logging():
    """
    Set the logging level to DEBUG for the test run
    """
    logger.setLevel(logging.DEBUG)
