"""
Scenario-level services for the acceptance harness.

This module composes the client and the retry executor into the lookups the
acceptance scenarios share.
"""

from .story_service import StoryService

__all__ = ["StoryService"]
