"""
Loguru setup for the acceptance harness.

Retry failures and scenario start lines go to stderr through loguru; pass/fail
and skip outcomes are reported by pytest, not here.
"""

import sys
from typing import Optional

from loguru import logger

from ..config import get_settings

TEXT_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{extra[scenario]}</cyan> - "
    "<level>{message}</level>"
)


def setup_logging(log_level: Optional[str] = None) -> None:
    """
    Route harness logs to stderr.

    Replaces loguru's default handler. With ``log_format="json"`` each record
    is written as one JSON object per line.

    Args:
        log_level: Minimum level to emit, defaults to ``settings.log_level``
    """
    settings = get_settings()
    level = log_level or settings.log_level
    as_json = settings.log_format == "json"

    logger.remove()
    logger.configure(extra={"scenario": "-"})
    logger.add(
        sys.stderr,
        format=TEXT_FORMAT,
        level=level,
        colorize=not as_json,
        serialize=as_json,
        backtrace=False,
        diagnose=False
    )

    logger.info(f"Harness logging at {level} ({settings.log_format})")


def get_logger(scenario: str):
    """Return a logger whose records are tagged with *scenario*."""
    return logger.bind(scenario=scenario)
