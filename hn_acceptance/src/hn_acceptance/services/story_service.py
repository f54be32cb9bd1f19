"""
Story lookups with retry applied.

Every call goes through the ``RetryExecutor`` with the endpoint URL as its
description, so an exhausted retry names the endpoint that kept failing.
"""

from typing import Iterable, List, Optional

from loguru import logger

from hn_acceptance.api import HackerNewsClient, RetryExecutor, StoryList
from hn_acceptance.models import Item


class StoryService:
    """Retrying access to story lists and items."""

    def __init__(self, client: HackerNewsClient, executor: RetryExecutor):
        """
        Initialize story service.

        Args:
            client: Hacker News API client
            executor: Retry executor applied to every request
        """
        self.client = client
        self.executor = executor

    def story_ids(self, story_list: StoryList) -> List[int]:
        return self.executor.run(
            lambda: self.client.get_story_ids(story_list),
            description=self.client.endpoints.list_url(story_list),
        )

    def item(self, item_id: int) -> Item:
        return self.executor.run(
            lambda: self.client.get_item(item_id),
            description=self.client.endpoints.item_url(item_id),
        )

    def raw_item(self, item_id: int) -> str:
        return self.executor.run(
            lambda: self.client.get_item_raw(item_id),
            description=self.client.endpoints.item_url(item_id),
        )

    def first_comment(self, story: Item) -> Optional[Item]:
        """
        Fetch the first child of *story*.

        Returns:
            The first child item, or None when the story has no children
        """
        if not story.has_kids:
            return None
        return self.item(story.kids[0])

    def find_story_without_comments(self, story_ids: Iterable[int]) -> Optional[int]:
        """
        Walk *story_ids* in order and return the first story with no children.

        Returns:
            The story identifier, or None if every story has children
        """
        for story_id in story_ids:
            story = self.item(story_id)
            if not story.has_kids:
                logger.info(f"Found story with no comments: {story_id}")
                return story_id
        return None
