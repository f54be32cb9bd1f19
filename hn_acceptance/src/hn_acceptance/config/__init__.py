"""Configuration module for the acceptance harness."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
