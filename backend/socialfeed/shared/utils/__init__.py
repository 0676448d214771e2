"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing and JWT management
- username: Username derivation from first/last name

Usage:
======
    from socialfeed.shared.utils.security import SecurityUtils
    from socialfeed.shared.utils.username import base_username
"""

from socialfeed.shared.utils.security import SecurityUtils
from socialfeed.shared.utils.username import (
    FALLBACK_USERNAME,
    base_username,
    next_available_username,
)

__all__ = [
    "SecurityUtils",
    "FALLBACK_USERNAME",
    "base_username",
    "next_available_username",
]
