"""
Feed ordering, pagination, search and like toggle tests.
"""
from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest
from sqlalchemy import update

from socialfeed.shared.models import Post


NOON = datetime(2025, 1, 1, 12, tzinfo=timezone.utc)


async def pin_post(session_factory, post, **values):
    async with session_factory() as session:
        await session.execute(update(Post).where(Post.id == UUID(post["id"])).values(**values))
        await session.commit()


class TestFeedOrdering:
    async def test_default_feed_is_newest_first(self, client, register, create_post):
        _, headers = await register()
        first = await create_post(headers, "one")
        second = await create_post(headers, "two")
        third = await create_post(headers, "three")

        response = await client.get("/posts")

        assert response.status_code == 200
        ids = [p["id"] for p in response.json()["posts"]]
        assert ids == [third["id"], second["id"], first["id"]]

    async def test_most_liked(self, client, register, create_post):
        _, ada = await register("Ada", "Smith")
        _, bob = await register("Bob", "Jones")
        one = await create_post(ada, "one")
        two = await create_post(ada, "two")
        three = await create_post(ada, "three")
        await client.put(f"/posts/{one['id']}/like", headers=bob)
        await client.put(f"/posts/{three['id']}/like", headers=bob)
        await client.put(f"/posts/{three['id']}/like", headers=ada)

        response = await client.get("/posts", params={"filter": "most-liked"})

        posts = response.json()["posts"]
        assert [p["id"] for p in posts] == [three["id"], one["id"], two["id"]]
        assert [p["likeCount"] for p in posts] == [2, 1, 0]

    async def test_most_commented(self, client, register, create_post):
        _, headers = await register()
        quiet = await create_post(headers, "quiet")
        busy = await create_post(headers, "busy")
        older_busy = await create_post(headers, "older busy")
        for post, comments in ((busy, 1), (older_busy, 3)):
            for n in range(comments):
                await client.post(f"/posts/{post['id']}/comment", json={"text": f"c{n}"}, headers=headers)

        response = await client.get("/posts", params={"filter": "most-commented"})

        ids = [p["id"] for p in response.json()["posts"]]
        assert ids == [older_busy["id"], busy["id"], quiet["id"]]

    async def test_most_shared(self, client, register, create_post, session_factory):
        _, headers = await register()
        low = await create_post(headers, "low")
        high = await create_post(headers, "high")
        none = await create_post(headers, "none")
        await pin_post(session_factory, high, shares=5)
        await pin_post(session_factory, low, shares=2)

        response = await client.get("/posts", params={"filter": "most-shared"})

        ids = [p["id"] for p in response.json()["posts"]]
        assert ids == [high["id"], low["id"], none["id"]]

    @pytest.mark.parametrize("feed_filter", ["most-liked", "most-commented", "most-shared"])
    async def test_ties_go_to_the_newer_post(
        self, client, register, create_post, session_factory, feed_filter
    ):
        _, headers = await register()
        newer = await create_post(headers, "newer")
        older = await create_post(headers, "older")
        await pin_post(session_factory, newer, created_at=NOON + timedelta(hours=1), shares=2)
        await pin_post(session_factory, older, created_at=NOON, shares=2)
        for post in (newer, older):
            if feed_filter == "most-liked":
                await client.put(f"/posts/{post['id']}/like", headers=headers)
            elif feed_filter == "most-commented":
                await client.post(f"/posts/{post['id']}/comment", json={"text": "hi"}, headers=headers)

        response = await client.get("/posts", params={"filter": feed_filter})

        assert [p["id"] for p in response.json()["posts"]] == [newer["id"], older["id"]]

    async def test_unknown_filter_falls_back_to_newest(self, client, register, create_post):
        _, headers = await register()
        first = await create_post(headers, "one")
        second = await create_post(headers, "two")

        response = await client.get("/posts", params={"filter": "trending"})

        assert response.status_code == 200
        assert [p["id"] for p in response.json()["posts"]] == [second["id"], first["id"]]


class TestPagination:
    async def test_page_totals(self, client, register, create_post):
        _, headers = await register()
        for n in range(5):
            await create_post(headers, f"post {n}")

        response = await client.get("/posts", params={"page": 3, "limit": 2})

        body = response.json()
        assert body["currentPage"] == 3
        assert body["totalPages"] == 3
        assert body["totalPosts"] == 5
        assert [p["text"] for p in body["posts"]] == ["post 0"]

    async def test_pages_do_not_overlap(self, client, register, create_post):
        _, headers = await register()
        for n in range(4):
            await create_post(headers, f"post {n}")

        page_one = (await client.get("/posts", params={"page": 1, "limit": 2})).json()
        page_two = (await client.get("/posts", params={"page": 2, "limit": 2})).json()

        seen = [p["id"] for p in page_one["posts"] + page_two["posts"]]
        assert len(seen) == len(set(seen)) == 4

    async def test_empty_feed(self, client):
        body = (await client.get("/posts")).json()

        assert body == {"posts": [], "currentPage": 1, "totalPages": 0, "totalPosts": 0}

    @pytest.mark.parametrize("params", [{"page": 0}, {"limit": 0}, {"limit": 101}, {"page": "x"}])
    async def test_invalid_paging_is_rejected(self, client, params):
        response = await client.get("/posts", params=params)

        assert response.status_code == 400
        assert response.json()["error"]["code"] == "VALIDATION_ERROR"

    async def test_validation_message_names_the_field(self, client):
        response = await client.get("/posts", params={"limit": 0})

        error = response.json()["error"]
        assert error["message"].startswith("limit: ")
        assert error["details"]["errors"][0]["loc"] == ["query", "limit"]


class TestSearch:
    async def test_search_is_case_insensitive_substring(self, client, register, create_post):
        _, headers = await register()
        hit = await create_post(headers, "Hello World")
        await create_post(headers, "goodbye")

        response = await client.get("/posts/search", params={"q": "hello"})

        assert response.status_code == 200
        assert [p["id"] for p in response.json()["posts"]] == [hit["id"]]

    async def test_search_without_matches(self, client, register, create_post):
        _, headers = await register()
        await create_post(headers, "hello")

        response = await client.get("/posts/search", params={"q": "zzz"})

        assert response.status_code == 200
        assert response.json() == {"posts": []}

    async def test_wildcards_match_literally(self, client, register, create_post):
        _, headers = await register()
        hit = await create_post(headers, "100% sure")
        await create_post(headers, "not sure")

        response = await client.get("/posts/search", params={"q": "%"})

        assert [p["id"] for p in response.json()["posts"]] == [hit["id"]]

    @pytest.mark.parametrize("params", [{}, {"q": ""}, {"q": "   "}])
    async def test_empty_query_is_rejected(self, client, params):
        response = await client.get("/posts/search", params=params)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Search query required"


class TestLikes:
    async def test_like_and_unlike(self, client, register, create_post):
        _, ada = await register("Ada", "Smith")
        bob_user, bob = await register("Bob", "Jones")
        post = await create_post(ada)

        liked = await client.put(f"/posts/{post['id']}/like", headers=bob)

        assert liked.status_code == 200
        assert liked.json() == {"message": "Post liked", "liked": True, "likeCount": 1}
        feed_post = (await client.get("/posts")).json()["posts"][0]
        assert [u["id"] for u in feed_post["likes"]] == [bob_user["id"]]
        assert "email" not in feed_post["likes"][0]

        unliked = await client.put(f"/posts/{post['id']}/like", headers=bob)

        assert unliked.json() == {"message": "Post unliked", "liked": False, "likeCount": 0}
        feed_post = (await client.get("/posts")).json()["posts"][0]
        assert feed_post["likes"] == []
        assert feed_post["likeCount"] == 0

    async def test_repeated_toggles_end_on_parity(self, client, register, create_post):
        _, headers = await register()
        post = await create_post(headers)

        for _ in range(5):
            response = await client.put(f"/posts/{post['id']}/like", headers=headers)

        assert response.json()["liked"] is True
        assert response.json()["likeCount"] == 1

    async def test_like_missing_post(self, client, register):
        _, headers = await register()

        response = await client.put(
            "/posts/00000000-0000-4000-8000-000000000000/like",
            headers=headers,
        )

        assert response.status_code == 404

    async def test_like_requires_token(self, client, register, create_post):
        _, headers = await register()
        post = await create_post(headers)

        response = await client.put(f"/posts/{post['id']}/like")

        assert response.status_code == 401
