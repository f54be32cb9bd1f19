"""API access layer: endpoints, fetcher, retry executor and client."""

from .client import HackerNewsClient
from .endpoints import Endpoints, StoryList
from .errors import (
    APIError,
    BodyReadError,
    DecodeError,
    RetryExhaustedError,
    TransportError,
    UnexpectedStatusError,
)
from .fetcher import fetch_json, fetch_text
from .retry import RetryExecutor

__all__ = [
    "APIError",
    "BodyReadError",
    "DecodeError",
    "Endpoints",
    "HackerNewsClient",
    "RetryExecutor",
    "RetryExhaustedError",
    "StoryList",
    "TransportError",
    "UnexpectedStatusError",
    "fetch_json",
    "fetch_text",
]
