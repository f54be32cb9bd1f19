"""
HTTP client for the Hacker News API.

This module binds the endpoint layout to the single-shot fetcher. Each method
issues exactly one request; retry policy belongs to the caller.
"""

from typing import List, Optional, Type, TypeVar

from loguru import logger

from ..config import get_settings
from ..models import Item
from .endpoints import Endpoints, StoryList
from .fetcher import fetch_json, fetch_text

ItemT = TypeVar("ItemT")


class HackerNewsClient:
    """
    Read-only client for the Hacker News API.

    Provides the list and item endpoints used by the acceptance scenarios.
    """

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize the API client.

        Args:
            base_url: Base URL for the Hacker News API
            timeout: Request timeout in seconds
        """
        settings = get_settings()
        self.endpoints = Endpoints(base_url=base_url or settings.api_base_url)
        self.timeout = timeout or settings.request_timeout

        logger.info(f"Initialized HackerNewsClient with base_url: {self.endpoints.base_url}")

    def get_story_ids(self, story_list: StoryList) -> List[int]:
        """
        Retrieve the identifiers in a story list.

        Args:
            story_list: Which list to read (top, new or best)

        Returns:
            List[int]: Item identifiers in upstream order
        """
        return fetch_json(self.endpoints.list_url(story_list), List[int], timeout=self.timeout)

    def get_top_stories(self) -> List[int]:
        return self.get_story_ids(StoryList.TOP)

    def get_new_stories(self) -> List[int]:
        return self.get_story_ids(StoryList.NEW)

    def get_best_stories(self) -> List[int]:
        return self.get_story_ids(StoryList.BEST)

    def get_item(self, item_id: int, model: Type[ItemT] = Item) -> ItemT:
        """
        Retrieve a single item.

        A missing or deleted item comes back as ``null`` and decodes to an
        empty model; use ``get_item_raw`` to assert on that case.

        Args:
            item_id: Item identifier
            model: Destination model, defaults to ``Item``

        Returns:
            The decoded item
        """
        return fetch_json(self.endpoints.item_url(item_id), model, timeout=self.timeout)

    def get_item_raw(self, item_id: int) -> str:
        """Retrieve the undecoded body of ``/item/{id}.json``."""
        return fetch_text(self.endpoints.item_url(item_id), timeout=self.timeout)
