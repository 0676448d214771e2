"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories,
adapters, and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database
                ↘ StorageAdapter (images)

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Run inside the request's session (one transaction per request)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration, login and session resolution
- UserService: Follow toggling and follow counts
- PostService: Post creation/deletion and comments
- FeedService: Feed pages, search and likes

Usage:
======
    from socialfeed.shared.services import AuthService, FeedService

    service = AuthService(db)
    user, token = await service.login_user(email, password)
"""

from socialfeed.shared.services.auth_service import AuthService
from socialfeed.shared.services.user_service import UserService, FollowCounts
from socialfeed.shared.services.post_service import PostService
from socialfeed.shared.services.feed_service import FeedService, FeedPage

__all__ = [
    "AuthService",
    "UserService",
    "FollowCounts",
    "PostService",
    "FeedService",
    "FeedPage",
]
