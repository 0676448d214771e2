"""
Toggle engine tests against the like and follow membership tables.
"""
import asyncio

import pytest
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from socialfeed.shared.core.exceptions import InternalError
from socialfeed.shared.models import Base
from socialfeed.shared.models.enums import ToggleOutcome
from socialfeed.shared.repositories import (
    FollowRepository,
    PostLikeRepository,
    PostRepository,
    UserRepository,
)


async def make_user(db, username: str):
    return await UserRepository(db).create(
        first_name=username.title(),
        last_name="Test",
        username=username,
        email=f"{username}@example.com",
        password_hash="x",
    )


@pytest.fixture
async def ada(db):
    return await make_user(db, "ada")


@pytest.fixture
async def bob(db):
    return await make_user(db, "bob")


@pytest.fixture
async def post(db, ada):
    return await PostRepository(db).create(user_id=ada.id, text="hello")


async def test_like_toggle_alternates(db, post, bob):
    repo = PostLikeRepository(db)

    assert await repo.toggle_like(post.id, bob.id) == ToggleOutcome.ADDED
    assert await repo.count_for_post(post.id) == 1
    assert await repo.toggle_like(post.id, bob.id) == ToggleOutcome.REMOVED
    assert await repo.count_for_post(post.id) == 0


@pytest.mark.parametrize("toggles", [1, 2, 5, 6])
async def test_final_state_is_parity_of_toggles(db, post, bob, toggles):
    repo = PostLikeRepository(db)

    for _ in range(toggles):
        await repo.toggle_like(post.id, bob.id)

    liked = await repo.contains(post_id=post.id, user_id=bob.id)
    assert liked == (toggles % 2 == 1)
    assert await repo.count_for_post(post.id) == toggles % 2


async def test_like_count_is_size_of_like_set(db, post, ada, bob):
    repo = PostLikeRepository(db)
    carol = await make_user(db, "carol")

    for user in (ada, bob, carol):
        await repo.toggle_like(post.id, user.id)
    await repo.toggle_like(post.id, bob.id)

    assert await repo.count_for_post(post.id) == 2


async def test_add_is_idempotent(db, post, bob):
    repo = PostLikeRepository(db)

    assert await repo.add(post_id=post.id, user_id=bob.id) is True
    assert await repo.add(post_id=post.id, user_id=bob.id) is False
    assert await repo.count_for_post(post.id) == 1


async def test_remove_missing_row_reports_false(db, post, bob):
    repo = PostLikeRepository(db)

    assert await repo.remove(post_id=post.id, user_id=bob.id) is False


async def test_partial_key_is_rejected(db, post):
    repo = PostLikeRepository(db)

    with pytest.raises(ValueError):
        await repo.toggle(post_id=post.id)


async def test_toggle_gives_up_when_every_attempt_races(db, post, bob, monkeypatch):
    repo = PostLikeRepository(db)

    async def never(**key):
        return False

    monkeypatch.setattr(repo, "remove", never)
    monkeypatch.setattr(repo, "add", never)

    with pytest.raises(InternalError):
        await repo.toggle_like(post.id, bob.id)


async def test_follow_is_visible_from_both_sides(db, ada, bob):
    repo = FollowRepository(db)

    assert await repo.toggle_follow(ada.id, bob.id) == ToggleOutcome.ADDED

    assert await repo.contains(follower_id=ada.id, followee_id=bob.id)
    assert not await repo.contains(follower_id=bob.id, followee_id=ada.id)
    assert await repo.count_following(ada.id) == 1
    assert await repo.count_followers(bob.id) == 1
    assert await repo.count_followers(ada.id) == 0


async def test_unfollow_clears_both_sides(db, ada, bob):
    repo = FollowRepository(db)

    await repo.toggle_follow(ada.id, bob.id)
    assert await repo.toggle_follow(ada.id, bob.id) == ToggleOutcome.REMOVED

    assert await repo.count_following(ada.id) == 0
    assert await repo.count_followers(bob.id) == 0


@pytest.fixture
async def file_engine(tmp_path):
    """File-backed database so each session gets its own connection."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'toggles.db'}",
        connect_args={"timeout": 30},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.mark.parametrize("requests", [5, 6])
async def test_concurrent_toggles_converge_to_parity(file_engine, requests):
    factory = async_sessionmaker(file_engine, expire_on_commit=False)
    async with factory() as session:
        ada = await make_user(session, "ada")
        post = await PostRepository(session).create(user_id=ada.id, text="hello")
        await session.commit()

    async def toggle_once():
        async with factory() as session:
            outcome = await PostLikeRepository(session).toggle_like(post.id, ada.id)
            await session.commit()
            return outcome

    outcomes = await asyncio.gather(*(toggle_once() for _ in range(requests)))

    async with factory() as session:
        count = await PostLikeRepository(session).count_for_post(post.id)
    assert count == requests % 2
    assert outcomes.count(ToggleOutcome.ADDED) - outcomes.count(ToggleOutcome.REMOVED) == count
