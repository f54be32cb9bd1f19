"""
Unit tests for StoryService.

The client is mocked; a zero-backoff executor keeps the retry path fast.
"""

from unittest.mock import Mock

import pytest

from hn_acceptance.api import Endpoints, HackerNewsClient, RetryExecutor, RetryExhaustedError, StoryList
from hn_acceptance.api.errors import TransportError
from hn_acceptance.models import Item
from hn_acceptance.services import StoryService


@pytest.fixture
def mock_client():
    client = Mock(spec=HackerNewsClient)
    client.endpoints = Endpoints(base_url="http://test-api.com/v0")
    return client


@pytest.fixture
def service(mock_client):
    return StoryService(mock_client, RetryExecutor(max_attempts=3, backoff_seconds=0))


def test_story_ids_retries_transient_failure(service, mock_client):
    mock_client.get_story_ids.side_effect = [TransportError("reset"), [1, 2, 3]]

    assert service.story_ids(StoryList.TOP) == [1, 2, 3]
    assert mock_client.get_story_ids.call_count == 2


def test_story_ids_exhausted_names_endpoint(service, mock_client):
    mock_client.get_story_ids.side_effect = TransportError("Connection refused")

    with pytest.raises(RetryExhaustedError) as exc_info:
        service.story_ids(StoryList.NEW)

    assert "http://test-api.com/v0/newstories.json" in str(exc_info.value)
    assert "Connection refused" in str(exc_info.value)
    assert mock_client.get_story_ids.call_count == 3


def test_item_and_raw_item(service, mock_client):
    mock_client.get_item.return_value = Item(id=7, type="story", title="t")
    mock_client.get_item_raw.return_value = "null"

    assert service.item(7).id == 7
    assert service.raw_item(0) == "null"
    mock_client.get_item.assert_called_once_with(7)
    mock_client.get_item_raw.assert_called_once_with(0)


def test_first_comment_without_kids(service, mock_client):
    assert service.first_comment(Item(id=1, type="story")) is None
    mock_client.get_item.assert_not_called()


def test_first_comment_fetches_first_kid(service, mock_client):
    mock_client.get_item.return_value = Item(id=11, type="comment", text="first!")

    comment = service.first_comment(Item(id=1, type="story", kids=[11, 12]))

    assert comment.id == 11
    mock_client.get_item.assert_called_once_with(11)


def test_find_story_without_comments(service, mock_client, log_messages):
    stories = {
        1: Item(id=1, kids=[10]),
        2: Item(id=2),
        3: Item(id=3),
    }
    mock_client.get_item.side_effect = lambda item_id: stories[item_id]

    assert service.find_story_without_comments([1, 2, 3]) == 2
    assert mock_client.get_item.call_count == 2
    assert "Found story with no comments: 2" in log_messages


def test_find_story_without_comments_none_found(service, mock_client):
    mock_client.get_item.side_effect = lambda item_id: Item(id=item_id, kids=[99])

    assert service.find_story_without_comments([1, 2]) is None
    assert mock_client.get_item.call_count == 2
