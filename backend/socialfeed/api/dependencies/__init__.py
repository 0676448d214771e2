"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user(), get_optional_user(), CurrentUser, OptionalUser
- Services: get_*_service() functions, get_storage_adapter()

Type Aliases:
=============
Type aliases provide cleaner route signatures:

    # Instead of this:
    async def handler(
        db: AsyncSession = Depends(get_db),
        user: User = Depends(get_current_user)
    ):

    # Write this:
    async def handler(db: DbSession, user: CurrentUser):

Usage:
======
    from socialfeed.api.dependencies import CurrentUser

    @router.put("/follow/{user_id}")
    async def follow(user_id: UUID, current_user: CurrentUser):
        ...
"""

from socialfeed.api.dependencies.database import (
    get_db,
    DbSession,
)
from socialfeed.api.dependencies.auth import (
    get_bearer_token,
    get_current_user,
    get_optional_user,
    CurrentUser,
    OptionalUser,
)
from socialfeed.api.dependencies.services import (
    get_storage_adapter,
    get_auth_service,
    get_user_service,
    get_post_service,
    get_feed_service,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_bearer_token",
    "get_current_user",
    "get_optional_user",
    "CurrentUser",
    "OptionalUser",
    # Services
    "get_storage_adapter",
    "get_auth_service",
    "get_user_service",
    "get_post_service",
    "get_feed_service",
]
