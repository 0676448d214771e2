"""
Authentication Service

Business logic for user registration, login and session resolution.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Utilities (hashing, tokens, username generation)
- Domain rules

Session Tokens:
===============
A session token is a signed JWT carrying the user id. Resolving it checks
the signature and expiry, then loads the user, so a token of a user that
no longer exists is rejected even while unexpired.

Usage:
======
    from socialfeed.shared.services.auth_service import AuthService

    service = AuthService(db)
    user, token = await service.register_user("Ada", "Smith", email, password)
    user = await service.resolve_session(token)
"""

from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.shared.core.exceptions import (
    AuthenticationError,
    ConflictError,
    DuplicateResourceError,
    ValidationError,
)
from socialfeed.shared.core.logging import logger
from socialfeed.shared.models.user import User
from socialfeed.shared.repositories.user_repository import UserRepository
from socialfeed.shared.utils.security import SecurityUtils
from socialfeed.shared.utils.username import base_username, next_available_username


def _blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with name, email and password
    - User authentication (login)
    - JWT token generation and resolution

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = UserRepository(session)

    # ═══════════════════════════════════════════════════════════════════════════
    # TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_session_token(user: User) -> str:
        """Issue a signed session token for a user."""
        return SecurityUtils.issue_session_token(user.id)

    async def resolve_session(self, token: Optional[str]) -> User:
        """
        Resolve a session token to its user.

        Args:
            token: Raw bearer token

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: Token missing, malformed, expired, without
                a valid user id, or the user no longer exists
        """
        if not token:
            raise AuthenticationError("Authorization header required")

        try:
            user_id = SecurityUtils.read_session_token(token)
        except ValueError as e:
            raise AuthenticationError(str(e)) from e

        user = await self.repo.get(user_id)
        if user is None:
            raise AuthenticationError("User no longer exists")

        return user

    # ═══════════════════════════════════════════════════════════════════════════
    # REGISTRATION & LOGIN
    # ═══════════════════════════════════════════════════════════════════════════

    async def register_user(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str],
        password: Optional[str],
    ) -> Tuple[User, str]:
        """
        Register a new user.

        Creates the account with a generated username and returns a
        session token for it.

        Args:
            first_name: Given name
            last_name: Family name
            email: Email address, matched case-insensitively
            password: Plain text password (will be hashed)

        Returns:
            Tuple of (user, session_token)

        Raises:
            ValidationError: If any field is missing or blank
            DuplicateResourceError: If email already registered
            ConflictError: If a concurrent signup took the email or username

        Example:
            user, token = await service.register_user(
                first_name="Ada",
                last_name="Smith",
                email="ada@example.com",
                password="secure_password123"
            )
            user.username  # "adasmith", or "adasmith1" if taken
        """
        if _blank(first_name) or _blank(last_name) or _blank(email) or _blank(password):
            raise ValidationError("Please fill in all fields")

        first_name = first_name.strip()
        last_name = last_name.strip()
        email = email.strip().lower()

        if await self.repo.email_exists(email):
            raise DuplicateResourceError("User with this email already exists")

        base = base_username(first_name, last_name)
        username = next_available_username(base, await self.repo.usernames_with_prefix(base))

        try:
            user = await self.repo.create(
                first_name=first_name,
                last_name=last_name,
                username=username,
                email=email,
                password_hash=SecurityUtils.hash_password(password),
            )
        except IntegrityError as e:
            # Unique index on email or username lost a race with another signup
            raise ConflictError("User already exists, please try again") from e

        logger.info("User registered", user_id=str(user.id), username=user.username)

        return user, self.create_session_token(user)

    async def login_user(
        self,
        email: Optional[str],
        password: Optional[str],
    ) -> Tuple[User, str]:
        """
        Authenticate user and generate token.

        Unknown email and wrong password fail identically.

        Args:
            email: User's email address
            password: Plain text password

        Returns:
            Tuple of (user, session_token)

        Raises:
            ValidationError: If email or password is missing
            AuthenticationError: If credentials are invalid
        """
        if _blank(email) or not password:
            raise ValidationError("Please provide email and password")

        user = await self.repo.get_by_email(email)
        if not user or not SecurityUtils.verify_password(password, user.password_hash):
            raise AuthenticationError("Invalid credentials")

        logger.info("User logged in", user_id=str(user.id))

        return user, self.create_session_token(user)
