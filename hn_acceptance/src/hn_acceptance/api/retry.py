"""Bounded retry with linear backoff."""

import time
from typing import Callable, Optional, TypeVar

from loguru import logger

from ..config import get_settings
from .errors import RetryExhaustedError

T = TypeVar("T")


class RetryExecutor:
    """
    Re-run a zero-argument operation until it succeeds or the budget runs out.

    Attempt ``n`` failing is followed by a sleep of ``n * backoff_seconds``,
    except after the final attempt. All exceptions are retried alike. The
    executor keeps no state between ``run`` calls and is safe to share.
    """

    def __init__(self, max_attempts: Optional[int] = None, backoff_seconds: Optional[float] = None):
        """
        Initialize the executor.

        Args:
            max_attempts: Attempt bound, defaults to settings (3)
            backoff_seconds: Backoff unit in seconds, defaults to settings (1.0)
        """
        settings = get_settings()
        self.max_attempts = max_attempts if max_attempts is not None else settings.retry_max_attempts
        self.backoff_seconds = (
            backoff_seconds if backoff_seconds is not None else settings.retry_backoff_seconds
        )

        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {self.max_attempts}")
        if self.backoff_seconds < 0:
            raise ValueError(f"backoff_seconds must not be negative, got {self.backoff_seconds}")

    def run(self, operation: Callable[[], T], description: Optional[str] = None) -> T:
        """
        Execute *operation* with retries.

        Args:
            operation: Callable taking no arguments
            description: What is being attempted, e.g. the endpoint URL

        Returns:
            The result of the first successful attempt

        Raises:
            RetryExhaustedError: If every attempt failed
        """
        last_error: Optional[Exception] = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                return operation()
            except Exception as e:
                last_error = e
                logger.warning(f"Attempt {attempt} failed: {e}")

            if attempt < self.max_attempts:
                time.sleep(self.backoff_seconds * attempt)

        logger.error(f"Max attempts ({self.max_attempts}) exceeded for {description or 'operation'}")
        raise RetryExhaustedError(self.max_attempts, description, last_error) from last_error
