"""pytest configuration shared by the pledge test suite."""

import logging

import pytest


@pytest.fixture(autouse=True)
def _pledge_debug_logging(caplog):
    """Capture pledge's DEBUG records so failures show the settlement trail."""
    caplog.set_level(logging.DEBUG, logger="pledge")
    yield
