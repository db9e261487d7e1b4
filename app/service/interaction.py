"""
Like/dislike and subscription toggles.

Every state change is a single conditional statement guarded by a unique
constraint, so concurrent toggles on the same (actor, target) pair can never
leave more than one row behind.
"""
import enum
import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy import select, delete, update, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import insert_for
from app.model.comment import CommentModel
from app.model.like_dislike import LikeDislikeModel, TargetKind, InteractionType
from app.model.subscription import SubscriptionModel
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.errors import InvalidArgument, NotFound, Conflict
from app.utility.time import utc_now

logger = logging.getLogger("uvicorn")

TARGET_MODELS = {
    TargetKind.VIDEO: VideoModel,
    TargetKind.COMMENT: CommentModel,
    TargetKind.TWEET: TweetModel,
}


class ToggleAction(str, enum.Enum):
    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"


@dataclass
class ToggleResult:
    action: ToggleAction
    status: Optional[InteractionType]


@dataclass
class SubscriptionResult:
    action: ToggleAction
    is_subscribed: bool


def parse_target_kind(value) -> TargetKind:
    try:
        return TargetKind(value)
    except ValueError:
        raise InvalidArgument(f"Unknown target kind '{value}'")


def parse_interaction_type(value) -> InteractionType:
    try:
        return InteractionType(value)
    except ValueError:
        raise InvalidArgument("Valid like/dislike type (either 'like' or 'dislike') is required")


async def ensure_target_exists(db: AsyncSession, target_kind: TargetKind, target_id: int):
    target = await db.get(TARGET_MODELS[target_kind], target_id)
    if target is None:
        raise NotFound(f"{target_kind.value.capitalize()} not found")
    return target


def _same_pair(actor_id: int, target_kind: TargetKind, target_id: int):
    return (
        LikeDislikeModel.liked_by_id == actor_id,
        LikeDislikeModel.target_kind == target_kind,
        LikeDislikeModel.target_id == target_id,
    )


async def _remove_if_same(db, pair, desired: InteractionType) -> bool:
    result = await db.execute(
        delete(LikeDislikeModel)
        .where(*pair, LikeDislikeModel.type == desired)
        .returning(LikeDislikeModel.id)
        .execution_options(synchronize_session=False)
    )
    return result.first() is not None


async def _switch_if_other(db, pair, desired: InteractionType) -> bool:
    result = await db.execute(
        update(LikeDislikeModel)
        .where(*pair, LikeDislikeModel.type != desired)
        .values(type=desired, updated_at=utc_now())
        .returning(LikeDislikeModel.id)
        .execution_options(synchronize_session=False)
    )
    return result.first() is not None


async def _insert_if_absent(db, actor_id, target_kind, target_id, desired) -> bool:
    stmt = insert_for(db, LikeDislikeModel).values(
        liked_by_id=actor_id,
        target_kind=target_kind,
        target_id=target_id,
        type=desired,
    )
    result = await db.execute(
        stmt.on_conflict_do_nothing(
            index_elements=["liked_by_id", "target_kind", "target_id"]
        ).returning(LikeDislikeModel.id)
    )
    return result.first() is not None


async def toggle_like_dislike(
        db: AsyncSession,
        actor_id: int,
        target_kind,
        target_id: int,
        desired_type,
) -> ToggleResult:
    """
    Flip the actor's like/dislike on a video, comment or tweet.

    none       -> row created with desired_type
    same type  -> row removed, status None
    other type -> row updated in place
    """
    target_kind = parse_target_kind(target_kind)
    desired = parse_interaction_type(desired_type)
    await ensure_target_exists(db, target_kind, target_id)

    pair = _same_pair(actor_id, target_kind, target_id)

    if await _remove_if_same(db, pair, desired):
        result = ToggleResult(ToggleAction.REMOVED, None)
    elif await _switch_if_other(db, pair, desired):
        result = ToggleResult(ToggleAction.UPDATED, desired)
    elif await _insert_if_absent(db, actor_id, target_kind, target_id, desired):
        result = ToggleResult(ToggleAction.CREATED, desired)
    else:
        # a concurrent toggle inserted the row between our statements
        current = await get_status(db, actor_id, target_kind, target_id)
        if current is desired:
            result = ToggleResult(ToggleAction.CREATED, desired)
        elif current is not None and await _switch_if_other(db, pair, desired):
            result = ToggleResult(ToggleAction.UPDATED, desired)
        else:
            await db.rollback()
            raise Conflict("Interaction changed concurrently, please retry")

    await db.commit()
    logger.info(
        f"{target_kind.value} {target_id}: {desired.value} {result.action.value} by user {actor_id}"
    )
    return result


async def get_status(
        db: AsyncSession,
        actor_id: int,
        target_kind,
        target_id: int,
) -> Optional[InteractionType]:
    target_kind = parse_target_kind(target_kind)
    return await db.scalar(
        select(LikeDislikeModel.type).where(*_same_pair(actor_id, target_kind, target_id))
    )


async def count_likes_dislikes(db: AsyncSession, target_kind, target_id: int) -> dict:
    target_kind = parse_target_kind(target_kind)
    result = await db.execute(
        select(LikeDislikeModel.type, func.count(LikeDislikeModel.id))
        .where(
            LikeDislikeModel.target_kind == target_kind,
            LikeDislikeModel.target_id == target_id,
        )
        .group_by(LikeDislikeModel.type)
    )
    counts = {interaction_type: total for interaction_type, total in result.all()}

    return {
        "totalLikes": counts.get(InteractionType.LIKE, 0),
        "totalDislikes": counts.get(InteractionType.DISLIKE, 0),
    }


async def toggle_subscription(db: AsyncSession, subscriber_id: int, channel_id: int) -> SubscriptionResult:
    channel = await db.get(UserModel, channel_id)
    if channel is None:
        raise NotFound("Channel not found")

    removed = await db.execute(
        delete(SubscriptionModel)
        .where(
            SubscriptionModel.subscriber_id == subscriber_id,
            SubscriptionModel.channel_id == channel_id,
        )
        .returning(SubscriptionModel.id)
        .execution_options(synchronize_session=False)
    )

    if removed.first() is not None:
        result = SubscriptionResult(ToggleAction.REMOVED, False)
    else:
        # losing the insert race means someone else just subscribed the same pair
        await db.execute(
            insert_for(db, SubscriptionModel)
            .values(subscriber_id=subscriber_id, channel_id=channel_id)
            .on_conflict_do_nothing(index_elements=["subscriber_id", "channel_id"])
        )
        result = SubscriptionResult(ToggleAction.CREATED, True)

    await db.commit()
    logger.info(f"user {subscriber_id} {'subscribed to' if result.is_subscribed else 'unsubscribed from'} {channel_id}")
    return result


async def is_subscribed(db: AsyncSession, subscriber_id: int, channel_id: int) -> bool:
    subscription_id = await db.scalar(
        select(SubscriptionModel.id).where(
            SubscriptionModel.subscriber_id == subscriber_id,
            SubscriptionModel.channel_id == channel_id,
        )
    )
    return subscription_id is not None
