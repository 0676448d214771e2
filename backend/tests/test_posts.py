"""
Post lifecycle tests: creation, images, deletion and comments.
"""
from pathlib import Path
from uuid import UUID

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from socialfeed.api.dependencies.services import get_storage_adapter
from socialfeed.api.main import app
from socialfeed.config.settings import settings
from socialfeed.shared.adapters import StorageAdapter
from socialfeed.shared.repositories import UserRepository
from socialfeed.shared.services.post_service import PostService


PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32
MISSING_POST = "00000000-0000-4000-8000-000000000000"


def stored_file(public_path: str) -> Path:
    return Path(settings.UPLOAD_DIR) / Path(public_path).name


async def upload_post(client, headers, text=None, filename="photo.png", content_type="image/png"):
    data = {"text": text} if text is not None else {}
    return await client.post(
        "/posts",
        data=data,
        files={"image": (filename, PNG_BYTES, content_type)},
        headers=headers,
    )


class TestCreatePost:
    async def test_text_only_post(self, client, register):
        ada, headers = await register()

        response = await client.post(
            "/posts",
            data={"text": "first post", "isPromotion": "true"},
            headers=headers,
        )

        assert response.status_code == 201
        body = response.json()
        assert body["message"] == "Post created successfully"
        post = body["post"]
        assert post["text"] == "first post"
        assert post["image"] is None
        assert post["isPromotion"] is True
        assert post["shares"] == 0
        assert post["user"]["id"] == ada["id"]
        assert post["user"]["username"] == "adasmith"
        assert "email" not in post["user"]
        assert post["likes"] == []
        assert post["likeCount"] == 0
        assert post["comments"] == []
        assert post["commentCount"] == 0

    async def test_image_only_post_is_stored_and_served(self, client, register):
        _, headers = await register()

        response = await upload_post(client, headers)

        assert response.status_code == 201
        post = response.json()["post"]
        assert post["text"] == ""
        assert post["image"].startswith("/uploads/")
        assert post["image"].endswith(".png")
        assert stored_file(post["image"]).read_bytes() == PNG_BYTES

        served = await client.get(post["image"])
        assert served.status_code == 200
        assert served.content == PNG_BYTES

    @pytest.mark.parametrize("text", [None, "", "   "])
    async def test_post_needs_text_or_image(self, client, register, text):
        _, headers = await register()
        data = {"text": text} if text is not None else {}

        response = await client.post("/posts", data=data, headers=headers)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Post must have text or image"

    @pytest.mark.parametrize(
        "filename,content_type",
        [
            ("notes.txt", "text/plain"),
            ("notes.png", "text/plain"),
            ("photo.exe", "image/png"),
        ],
    )
    async def test_non_image_upload_is_rejected(self, client, register, filename, content_type):
        _, headers = await register()

        response = await upload_post(client, headers, text="hi", filename=filename, content_type=content_type)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Only image files are allowed"
        feed = (await client.get("/posts")).json()
        assert feed["totalPosts"] == 0

    async def test_oversized_image_is_rejected(self, client, register):
        _, headers = await register()
        app.dependency_overrides[get_storage_adapter] = lambda: StorageAdapter(max_bytes=8)

        response = await upload_post(client, headers)

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Image is too large"

    async def test_create_requires_token(self, client):
        response = await client.post("/posts", data={"text": "hello"})

        assert response.status_code == 401


class TestDeletePost:
    async def test_non_owner_cannot_delete(self, client, register):
        _, ada_headers = await register("Ada", "Smith")
        _, bob_headers = await register("Bob", "Jones")
        post = (await upload_post(client, ada_headers, text="mine")).json()["post"]

        response = await client.delete(f"/posts/{post['id']}", headers=bob_headers)

        assert response.status_code == 403
        assert response.json()["error"]["message"] == "Not authorized to delete this post"
        feed = (await client.get("/posts")).json()
        assert [p["id"] for p in feed["posts"]] == [post["id"]]
        assert stored_file(post["image"]).exists()

    async def test_owner_delete_removes_post_likes_comments_and_image(self, client, register):
        _, ada_headers = await register("Ada", "Smith")
        _, bob_headers = await register("Bob", "Jones")
        post = (await upload_post(client, ada_headers, text="mine")).json()["post"]
        await client.put(f"/posts/{post['id']}/like", headers=bob_headers)
        await client.post(f"/posts/{post['id']}/comment", json={"text": "nice"}, headers=bob_headers)

        response = await client.delete(f"/posts/{post['id']}", headers=ada_headers)

        assert response.status_code == 200
        assert response.json() == {"message": "Post deleted successfully"}
        assert not stored_file(post["image"]).exists()
        assert (await client.get("/posts")).json()["totalPosts"] == 0
        comments = await client.get(f"/posts/{post['id']}/comments")
        assert comments.status_code == 404
        like = await client.put(f"/posts/{post['id']}/like", headers=bob_headers)
        assert like.status_code == 404

    async def test_image_stays_when_delete_cannot_commit(
        self, client, register, session_factory, monkeypatch
    ):
        ada, headers = await register()
        post = (await upload_post(client, headers, text="mine")).json()["post"]

        async def failing_commit(self):
            raise OperationalError("COMMIT", {}, Exception("disk I/O error"))

        async with session_factory() as session:
            owner = await UserRepository(session).get(UUID(ada["id"]))
            service = PostService(session, StorageAdapter())
            monkeypatch.setattr(AsyncSession, "commit", failing_commit)

            with pytest.raises(OperationalError):
                await service.delete_post(UUID(post["id"]), owner)

            monkeypatch.undo()
            await session.rollback()

        assert stored_file(post["image"]).exists()
        feed = (await client.get("/posts")).json()
        assert [p["id"] for p in feed["posts"]] == [post["id"]]

    async def test_delete_missing_post(self, client, register):
        _, headers = await register()

        response = await client.delete(f"/posts/{MISSING_POST}", headers=headers)

        assert response.status_code == 404


class TestComments:
    async def test_comments_keep_insertion_order(self, client, register, create_post):
        _, ada_headers = await register("Ada", "Smith")
        bob, bob_headers = await register("Bob", "Jones")
        post = await create_post(ada_headers)

        first = await client.post(
            f"/posts/{post['id']}/comment",
            json={"text": "  first  "},
            headers=bob_headers,
        )
        second = await client.post(
            f"/posts/{post['id']}/comment",
            json={"text": "second"},
            headers=ada_headers,
        )

        assert first.status_code == 201
        assert first.json()["message"] == "Comment added successfully"
        assert first.json()["comment"]["text"] == "first"
        assert first.json()["comment"]["user"]["id"] == bob["id"]
        assert first.json()["commentCount"] == 1
        assert second.json()["commentCount"] == 2

        listing = (await client.get(f"/posts/{post['id']}/comments")).json()
        assert [c["text"] for c in listing["comments"]] == ["first", "second"]
        assert listing["commentCount"] == 2

        feed_post = (await client.get("/posts")).json()["posts"][0]
        assert [c["text"] for c in feed_post["comments"]] == ["first", "second"]
        assert feed_post["commentCount"] == 2

    @pytest.mark.parametrize("payload", [{"text": ""}, {"text": "   "}, {}])
    async def test_empty_comment_is_rejected(self, client, register, create_post, payload):
        _, headers = await register()
        post = await create_post(headers)

        response = await client.post(f"/posts/{post['id']}/comment", json=payload, headers=headers)

        assert response.status_code == 400

    async def test_comment_on_missing_post(self, client, register):
        _, headers = await register()

        response = await client.post(
            f"/posts/{MISSING_POST}/comment",
            json={"text": "hello"},
            headers=headers,
        )

        assert response.status_code == 404
