"""
Follow toggle endpoint tests.
"""


async def test_follow_then_unfollow(client, register):
    ada, ada_headers = await register("Ada", "Smith")
    bob, bob_headers = await register("Bob", "Jones")

    response = await client.put(f"/auth/follow/{bob['id']}", headers=ada_headers)

    assert response.status_code == 200
    assert response.json() == {"message": "Followed successfully", "following": True}

    ada_me = (await client.get("/auth/me", headers=ada_headers)).json()["user"]
    bob_me = (await client.get("/auth/me", headers=bob_headers)).json()["user"]
    assert ada_me["following"] == 1
    assert ada_me["followers"] == 0
    assert bob_me["followers"] == 1
    assert bob_me["following"] == 0

    response = await client.put(f"/auth/follow/{bob['id']}", headers=ada_headers)

    assert response.json() == {"message": "Unfollowed successfully", "following": False}
    bob_me = (await client.get("/auth/me", headers=bob_headers)).json()["user"]
    assert bob_me["followers"] == 0


async def test_mutual_follow(client, register):
    ada, ada_headers = await register("Ada", "Smith")
    bob, bob_headers = await register("Bob", "Jones")

    await client.put(f"/auth/follow/{bob['id']}", headers=ada_headers)
    await client.put(f"/auth/follow/{ada['id']}", headers=bob_headers)

    ada_me = (await client.get("/auth/me", headers=ada_headers)).json()["user"]
    assert ada_me["followers"] == 1
    assert ada_me["following"] == 1


async def test_cannot_follow_yourself(client, register):
    ada, headers = await register()

    response = await client.put(f"/auth/follow/{ada['id']}", headers=headers)

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "You cannot follow yourself"


async def test_follow_unknown_user(client, register):
    _, headers = await register()

    response = await client.put(
        "/auth/follow/00000000-0000-4000-8000-000000000000",
        headers=headers,
    )

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "NOT_FOUND"


async def test_follow_malformed_id(client, register):
    _, headers = await register()

    response = await client.put("/auth/follow/not-a-uuid", headers=headers)

    assert response.status_code == 400


async def test_follow_requires_token(client, register):
    bob, _ = await register("Bob", "Jones")

    response = await client.put(f"/auth/follow/{bob['id']}")

    assert response.status_code == 401
