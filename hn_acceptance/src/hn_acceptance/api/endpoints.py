"""URL construction for the Hacker News API."""

from enum import Enum

from pydantic import BaseModel, field_validator


class StoryList(str, Enum):
    """List endpoints returning a flat array of item identifiers."""
    TOP = "top"
    NEW = "new"
    BEST = "best"

    @property
    def path(self) -> str:
        return f"{self.value}stories.json"


class Endpoints(BaseModel):
    """
    Immutable base URL plus the relative paths the harness requests.

    URLs are computed per call; nothing is cached on the instance.
    """
    base_url: str

    model_config = {"frozen": True}

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty")
        return v

    def list_url(self, story_list: StoryList) -> str:
        return f"{self.base_url}/{StoryList(story_list).path}"

    def item_url(self, item_id: int) -> str:
        return f"{self.base_url}/item/{int(item_id)}.json"
