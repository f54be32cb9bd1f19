"""Response models for the Hacker News API."""

from .items import VALID_ITEM_TYPES, Item, ItemType

__all__ = ["Item", "ItemType", "VALID_ITEM_TYPES"]
