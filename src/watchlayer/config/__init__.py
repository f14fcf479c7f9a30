"""
watchlayer configuration.

Pydantic-based settings read from WATCHLAYER_* environment variables and .env files.
"""

from watchlayer.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
