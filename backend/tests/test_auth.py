"""
Signup, login and current-user endpoint tests.
"""
from uuid import UUID

import pytest

from socialfeed.shared.utils.security import SecurityUtils


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


class TestSignup:
    async def test_signup_returns_token_and_public_user(self, client):
        response = await client.post(
            "/auth/signup",
            json={
                "firstName": "Ada",
                "lastName": "Smith",
                "email": "Ada@Example.com",
                "password": "password123",
            },
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "User registered successfully"
        assert body["token"]
        user = body["user"]
        assert user["username"] == "adasmith"
        assert user["email"] == "ada@example.com"
        assert user["firstName"] == "Ada"
        assert user["coins"] == 50
        assert user["balance"] == 0
        assert "password" not in user
        assert "passwordHash" not in user

    async def test_same_name_gets_numbered_usernames(self, register):
        first, _ = await register("Ada", "Smith")
        second, _ = await register("Ada", "Smith")
        third, _ = await register("ada", "SMITH")

        assert first["username"] == "adasmith"
        assert second["username"] == "adasmith1"
        assert third["username"] == "adasmith2"

    async def test_duplicate_email_is_rejected_in_any_case(self, client, register):
        await register(email="ada@example.com")

        response = await client.post(
            "/auth/signup",
            json={
                "firstName": "Other",
                "lastName": "Person",
                "email": "ADA@example.com",
                "password": "password123",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "User with this email already exists"

    @pytest.mark.parametrize("missing", ["firstName", "lastName", "email", "password"])
    async def test_missing_field_is_rejected(self, client, missing):
        payload = {
            "firstName": "Ada",
            "lastName": "Smith",
            "email": "ada@example.com",
            "password": "password123",
        }
        payload[missing] = ""

        response = await client.post("/auth/signup", json=payload)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Please fill in all fields"

    async def test_malformed_email_is_rejected(self, client):
        response = await client.post(
            "/auth/signup",
            json={
                "firstName": "Ada",
                "lastName": "Smith",
                "email": "not-an-email",
                "password": "password123",
            },
        )

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"


class TestLogin:
    async def test_login_with_any_email_case(self, client, register):
        user, _ = await register(email="ada@example.com", password="password123")

        response = await client.post(
            "/auth/login",
            json={"email": "ADA@example.com", "password": "password123"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "Login successful"
        assert body["token"]
        assert body["user"]["id"] == user["id"]

    async def test_wrong_password_and_unknown_email_look_the_same(self, client, register):
        await register(email="ada@example.com", password="password123")

        wrong_password = await client.post(
            "/auth/login",
            json={"email": "ada@example.com", "password": "nope"},
        )
        unknown_email = await client.post(
            "/auth/login",
            json={"email": "nobody@example.com", "password": "password123"},
        )

        assert wrong_password.status_code == unknown_email.status_code == 400
        assert wrong_password.json() == unknown_email.json()
        assert wrong_password.json()["error"]["message"] == "Invalid credentials"

    async def test_missing_credentials(self, client):
        response = await client.post("/auth/login", json={"email": "ada@example.com"})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Please provide email and password"


class TestMe:
    async def test_me_returns_profile_with_counts(self, client, register):
        user, headers = await register()

        response = await client.get("/auth/me", headers=headers)

        assert response.status_code == 200
        me = response.json()["user"]
        assert me["id"] == user["id"]
        assert me["followers"] == 0
        assert me["following"] == 0

    async def test_me_requires_token(self, client):
        response = await client.get("/auth/me")

        assert response.status_code == 401
        assert response.json()["error"]["code"] == "AUTHENTICATION_ERROR"

    async def test_me_rejects_bad_token(self, client):
        response = await client.get("/auth/me", headers=bearer("not-a-token"))

        assert response.status_code == 401

    async def test_token_for_unknown_user_is_rejected(self, client):
        token = SecurityUtils.issue_session_token(UUID("00000000-0000-4000-8000-000000000000"))

        response = await client.get("/auth/me", headers=bearer(token))

        assert response.status_code == 401
        assert response.json()["error"]["message"] == "User no longer exists"
