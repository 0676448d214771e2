"""
Route handlers.

- auth_handler:   signup, login, current user, follow toggle
- post_handler:   feed, search, create/delete post, like toggle, comments
- health_handler: liveness and readiness probes
"""

from socialfeed.api.handlers import (
    auth_handler,
    post_handler,
    health_handler,
)

__all__ = [
    "auth_handler",
    "post_handler",
    "health_handler",
]
