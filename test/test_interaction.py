import asyncio

import pytest
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession
from sqlalchemy.orm import sessionmaker

from app.db.database import Base
from app.model.comment import CommentModel
from app.model.like_dislike import LikeDislikeModel, TargetKind, InteractionType
from app.model.subscription import SubscriptionModel
from app.service import interaction
from app.service.errors import InvalidArgument, NotFound, Conflict
from app.service.interaction import (
    toggle_like_dislike,
    get_status,
    count_likes_dislikes,
    toggle_subscription,
    is_subscribed,
    ToggleAction,
)
from conftest import make_user, make_video


async def rows_for(db, actor_id, kind, target_id):
    return await db.scalar(
        select(func.count(LikeDislikeModel.id)).where(
            LikeDislikeModel.liked_by_id == actor_id,
            LikeDislikeModel.target_kind == kind,
            LikeDislikeModel.target_id == target_id,
        )
    )


@pytest.fixture
async def scene(db):
    owner = await make_user(db, "owner")
    viewer = await make_user(db, "viewer")
    video = await make_video(db, owner)
    return owner, viewer, video


async def test_first_toggle_creates_interaction(db, scene):
    _, viewer, video = scene

    result = await toggle_like_dislike(db, viewer.id, "video", video.id, "like")

    assert result.action is ToggleAction.CREATED
    assert result.status is InteractionType.LIKE
    assert await get_status(db, viewer.id, TargetKind.VIDEO, video.id) is InteractionType.LIKE
    assert await rows_for(db, viewer.id, TargetKind.VIDEO, video.id) == 1


async def test_same_type_twice_removes_interaction(db, scene):
    _, viewer, video = scene

    await toggle_like_dislike(db, viewer.id, TargetKind.VIDEO, video.id, "dislike")
    result = await toggle_like_dislike(db, viewer.id, TargetKind.VIDEO, video.id, "dislike")

    assert result.action is ToggleAction.REMOVED
    assert result.status is None
    assert await get_status(db, viewer.id, TargetKind.VIDEO, video.id) is None
    assert await rows_for(db, viewer.id, TargetKind.VIDEO, video.id) == 0


async def test_opposite_type_updates_in_place(db, scene):
    _, viewer, video = scene

    await toggle_like_dislike(db, viewer.id, TargetKind.VIDEO, video.id, "like")
    result = await toggle_like_dislike(db, viewer.id, TargetKind.VIDEO, video.id, "dislike")

    assert result.action is ToggleAction.UPDATED
    assert result.status is InteractionType.DISLIKE
    assert await rows_for(db, viewer.id, TargetKind.VIDEO, video.id) == 1
    assert await count_likes_dislikes(db, TargetKind.VIDEO, video.id) == {"totalLikes": 0, "totalDislikes": 1}


async def test_interactions_are_scoped_per_target_kind(db, scene):
    owner, viewer, video = scene
    comment = CommentModel(content="nice", video_id=video.id, owner_id=owner.id)
    db.add(comment)
    await db.commit()

    # same numeric id on a different kind is a different target
    await toggle_like_dislike(db, viewer.id, TargetKind.VIDEO, video.id, "like")
    await toggle_like_dislike(db, viewer.id, TargetKind.COMMENT, comment.id, "dislike")

    assert await get_status(db, viewer.id, TargetKind.VIDEO, video.id) is InteractionType.LIKE
    assert await get_status(db, viewer.id, TargetKind.COMMENT, comment.id) is InteractionType.DISLIKE


async def test_counts_across_users(db, scene):
    owner, viewer, video = scene
    third = await make_user(db, "third")

    await toggle_like_dislike(db, viewer.id, TargetKind.VIDEO, video.id, "like")
    await toggle_like_dislike(db, third.id, TargetKind.VIDEO, video.id, "like")
    await toggle_like_dislike(db, owner.id, TargetKind.VIDEO, video.id, "dislike")

    assert await count_likes_dislikes(db, "video", video.id) == {"totalLikes": 2, "totalDislikes": 1}


async def test_missing_target_is_not_found(db, scene):
    _, viewer, _ = scene

    with pytest.raises(NotFound, match="Tweet not found"):
        await toggle_like_dislike(db, viewer.id, TargetKind.TWEET, 999, "like")

    assert await db.scalar(select(func.count(LikeDislikeModel.id))) == 0


@pytest.mark.parametrize("kind, reaction", [
    ("video", "love"),
    ("video", None),
    ("playlist", "like"),
])
async def test_invalid_arguments(db, scene, kind, reaction):
    _, viewer, video = scene

    with pytest.raises(InvalidArgument):
        await toggle_like_dislike(db, viewer.id, kind, video.id, reaction)


async def test_lost_insert_race_collapses_into_winner(db, scene, monkeypatch):
    _, viewer, video = scene

    async def concurrent_insert(db, actor_id, target_kind, target_id, desired):
        # another request stored the same reaction between our update and insert
        db.add(LikeDislikeModel(
            liked_by_id=actor_id, target_kind=target_kind, target_id=target_id, type=desired
        ))
        await db.flush()
        return False

    monkeypatch.setattr(interaction, "_insert_if_absent", concurrent_insert)

    result = await toggle_like_dislike(db, viewer.id, TargetKind.VIDEO, video.id, "like")

    assert result.action is ToggleAction.CREATED
    assert result.status is InteractionType.LIKE
    assert await rows_for(db, viewer.id, TargetKind.VIDEO, video.id) == 1


async def test_subscription_toggle_round_trip(db, scene):
    owner, viewer, _ = scene

    first = await toggle_subscription(db, viewer.id, owner.id)
    assert first.is_subscribed is True
    assert await is_subscribed(db, viewer.id, owner.id)

    second = await toggle_subscription(db, viewer.id, owner.id)
    assert second.is_subscribed is False
    assert not await is_subscribed(db, viewer.id, owner.id)
    assert await db.scalar(select(func.count(SubscriptionModel.id))) == 0


async def test_subscription_to_missing_channel(db, scene):
    _, viewer, _ = scene

    with pytest.raises(NotFound, match="Channel not found"):
        await toggle_subscription(db, viewer.id, 12345)


async def test_concurrent_cold_toggles_leave_at_most_one_row(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'toggles.db'}",
        connect_args={"timeout": 30},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as db:
        owner = await make_user(db, "owner")
        viewer = await make_user(db, "viewer")
        video = await make_video(db, owner)

    async def toggle():
        async with factory() as session:
            return await toggle_like_dislike(session, viewer.id, TargetKind.VIDEO, video.id, "like")

    try:
        results = await asyncio.gather(*(toggle() for _ in range(8)), return_exceptions=True)

        for result in results:
            assert not isinstance(result, Exception) or isinstance(result, Conflict), result

        async with factory() as db:
            assert await rows_for(db, viewer.id, TargetKind.VIDEO, video.id) <= 1
    finally:
        await engine.dispose()
