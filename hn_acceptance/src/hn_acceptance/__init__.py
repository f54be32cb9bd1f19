"""
Hacker News acceptance harness.

This package provides a retrying JSON fetch primitive and a thin client for
the public Hacker News API, used by the acceptance scenarios under tests/.
"""

__version__ = "1.0.0"
