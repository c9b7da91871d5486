import logging

import pytest

from gearsetup.logger import gs_logger


def pytest_configure(config):
    """Set up test environment before tests run."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    gs_logger.disabled = True


@pytest.fixture
def traced_logger():
    """Enable the solver logger for one test and reset it afterwards."""
    gs_logger.clear()
    gs_logger.disabled = False
    yield gs_logger
    gs_logger.disabled = True
    gs_logger.clear()
