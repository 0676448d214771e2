"""
Password hashing and session token tests.
"""
from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from socialfeed.config.settings import settings
from socialfeed.shared.utils.security import SecurityUtils


def test_hash_is_salted_and_verifies():
    first = SecurityUtils.hash_password("password123")
    second = SecurityUtils.hash_password("password123")

    assert first != second
    assert first.startswith("$2")
    assert SecurityUtils.verify_password("password123", first)
    assert not SecurityUtils.verify_password("password124", first)


def test_verify_rejects_malformed_hash():
    assert SecurityUtils.verify_password("password123", "not-a-hash") is False


def test_session_token_names_its_user():
    user_id = uuid4()

    token = SecurityUtils.issue_session_token(user_id)

    assert SecurityUtils.read_session_token(token) == user_id


def test_session_token_lasts_seven_days():
    token = SecurityUtils.issue_session_token(uuid4())

    claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])

    assert claims["exp"] - claims["iat"] == int(timedelta(days=7).total_seconds())


def test_expired_token_is_rejected():
    token = SecurityUtils.issue_session_token(uuid4(), lifetime=timedelta(seconds=-1))

    with pytest.raises(ValueError, match="expired"):
        SecurityUtils.read_session_token(token)


def test_token_signed_with_other_key_is_rejected():
    token = SecurityUtils.issue_session_token(uuid4(), secret_key="other-secret")

    with pytest.raises(ValueError, match="Invalid token"):
        SecurityUtils.read_session_token(token)


def test_token_without_user_id_is_rejected():
    token = jwt.encode({"exp": 4102444800}, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)

    with pytest.raises(ValueError, match="Invalid token"):
        SecurityUtils.read_session_token(token)


def test_token_with_malformed_user_id_is_rejected():
    token = jwt.encode(
        {"user_id": "not-a-uuid", "exp": 4102444800},
        settings.SECRET_KEY,
        algorithm=settings.JWT_ALGORITHM,
    )

    with pytest.raises(ValueError, match="Invalid token payload"):
        SecurityUtils.read_session_token(token)


def test_garbage_token_is_rejected():
    with pytest.raises(ValueError):
        SecurityUtils.read_session_token("not.a.jwt")
