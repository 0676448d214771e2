"""
Enums used across the application.
"""

from enum import Enum
from typing import Optional


class FeedFilter(str, Enum):
    """Sort strategy for the post feed."""

    DEFAULT = "default"
    MOST_LIKED = "most-liked"
    MOST_COMMENTED = "most-commented"
    MOST_SHARED = "most-shared"

    @classmethod
    def parse(cls, value: Optional[str]) -> "FeedFilter":
        """Map a raw query value to a filter; unknown or missing values mean DEFAULT."""
        try:
            return cls(value)
        except ValueError:
            return cls.DEFAULT


class ToggleOutcome(str, Enum):
    """Transition applied by a membership toggle."""

    ADDED = "added"
    REMOVED = "removed"
