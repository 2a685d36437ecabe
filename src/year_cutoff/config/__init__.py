"""Configuration management for year-cutoff.

Configuration is loaded from environment variables (``YEAR_CUTOFF_`` prefix)
and an optional ``.env`` file, validated with Pydantic BaseSettings.

Usage:
    >>> from year_cutoff.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.log_level)
"""

from year_cutoff.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
