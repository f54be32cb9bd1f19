"""Project-level pytest configuration and shared fixtures."""

import pytest
from loguru import logger

from hn_acceptance.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop the cached Settings so env overrides made by a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted while the test runs."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
