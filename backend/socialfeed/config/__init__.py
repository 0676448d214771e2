"""
Environment-driven configuration (pydantic-settings).

    from socialfeed.config import settings

    settings.FEED_PAGE_SIZE, settings.UPLOAD_DIR, settings.is_sqlite
"""

from socialfeed.config.settings import settings, get_settings, Settings

__all__ = [
    "settings",
    "get_settings",
    "Settings",
]
