"""
Pytest fixtures for the live acceptance scenarios.

These tests talk to the real Hacker News API. The API is probed once per
session and every scenario is skipped when it cannot be reached, so an
offline run reports skips instead of retry exhaustion.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from hn_acceptance.api import APIError, HackerNewsClient, RetryExecutor, StoryList
from hn_acceptance.api.fetcher import fetch_text
from hn_acceptance.services import StoryService
from hn_acceptance.utils import get_logger, setup_logging

# Load optional overrides (HN_API_BASE_URL, HN_RETRY_BACKOFF_SECONDS, ...) from .env.test
env_file = Path(__file__).resolve().parents[3] / ".env.test"
if env_file.exists():
    load_dotenv(dotenv_path=env_file, override=False)


@pytest.fixture(scope="session", autouse=True)
def configure_logging():
    setup_logging()


@pytest.fixture(scope="session")
def hn_client():
    return HackerNewsClient()


@pytest.fixture(scope="session")
def retry_executor():
    return RetryExecutor()


@pytest.fixture(scope="session")
def story_service(hn_client, retry_executor):
    return StoryService(hn_client, retry_executor)


@pytest.fixture(scope="session", autouse=True)
def api_reachable(hn_client):
    """Skip every scenario when the upstream API is unreachable."""
    url = hn_client.endpoints.list_url(StoryList.TOP)
    try:
        fetch_text(url, timeout=10.0)
    except APIError as e:
        pytest.skip(f"Hacker News API not reachable at {hn_client.endpoints.base_url}: {e}")


@pytest.fixture(autouse=True)
def log_scenario(request):
    get_logger(request.node.nodeid).info(f"{request.node.name} started")
    yield
