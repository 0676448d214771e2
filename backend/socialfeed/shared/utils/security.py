"""
Security Utilities

Password hashes and session tokens.

Passwords:
==========
Stored as bcrypt hashes produced through passlib. The work factor is
BCRYPT_ROUNDS; the salt is embedded in the hash.

Session Tokens:
===============
A session token is an HS256 JWT naming exactly one user:

    {"user_id": "<uuid>", "iat": <issued>, "exp": <issued + lifetime>}

The lifetime is ACCESS_TOKEN_EXPIRE_MINUTES (7 days). Tokens are never
stored server-side; a token is valid while its signature and expiry check
out and its user still exists (the last part is checked by AuthService).

Usage:
======
    from socialfeed.shared.utils.security import SecurityUtils

    password_hash = SecurityUtils.hash_password("password123")
    SecurityUtils.verify_password("password123", password_hash)   # True

    token = SecurityUtils.issue_session_token(user.id)
    user_id = SecurityUtils.read_session_token(token)            # UUID
"""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import jwt
from passlib.context import CryptContext

from socialfeed.config.settings import settings


pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.BCRYPT_ROUNDS,
)

USER_ID_CLAIM = "user_id"


class SecurityUtils:
    """Password hashing and session token helpers."""

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORDS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, password_hash: str) -> bool:
        """
        Check a password against a stored hash.

        A stored value that is not a bcrypt hash never matches.
        """
        try:
            return pwd_context.verify(plain_password, password_hash)
        except ValueError:
            return False

    # ═══════════════════════════════════════════════════════════════════════════
    # SESSION TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def issue_session_token(
        user_id: UUID,
        secret_key: Optional[str] = None,
        lifetime: Optional[timedelta] = None,
    ) -> str:
        """
        Sign a session token for a user.

        Args:
            user_id: The user the token authenticates
            secret_key: Signing key (default: SECRET_KEY)
            lifetime: Validity period (default: ACCESS_TOKEN_EXPIRE_MINUTES)

        Returns:
            Encoded JWT
        """
        issued_at = datetime.now(timezone.utc)
        if lifetime is None:
            lifetime = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)

        claims = {
            USER_ID_CLAIM: str(user_id),
            "iat": issued_at,
            "exp": issued_at + lifetime,
        }
        return jwt.encode(
            claims,
            secret_key or settings.SECRET_KEY,
            algorithm=settings.JWT_ALGORITHM,
        )

    @staticmethod
    def read_session_token(token: str, secret_key: Optional[str] = None) -> UUID:
        """
        Verify a session token and return the user id it names.

        Raises:
            ValueError: Expired, badly signed or malformed token, or a
                payload without a valid user id
        """
        try:
            claims = jwt.decode(
                token,
                secret_key or settings.SECRET_KEY,
                algorithms=[settings.JWT_ALGORITHM],
                options={"require": ["exp", USER_ID_CLAIM]},
            )
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e

        try:
            return UUID(str(claims[USER_ID_CLAIM]))
        except ValueError as e:
            raise ValueError("Invalid token payload") from e
