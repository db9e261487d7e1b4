"""
Channel level read models: dashboard statistics, video listings and profile.
"""
from sqlalchemy import select, func, and_
from sqlalchemy.ext.asyncio import AsyncSession

from app.model.like_dislike import LikeDislikeModel, TargetKind, InteractionType
from app.model.subscription import SubscriptionModel
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.aggregate.common import reaction_counts, count, paginated
from app.service.errors import NotFound
from app.utility.pagination import Page
from app.utility.serializer import user_card


async def channel_stats(db: AsyncSession, channel_id: int) -> dict:
    """
    Totals for a channel's dashboard.

    The four numbers come from independent queries and are not a single snapshot.
    totalLikes only counts `like` rows on videos the channel owns.
    """
    total_videos = await count(
        db, select(func.count(VideoModel.id)).where(VideoModel.owner_id == channel_id)
    )
    total_subscribers = await count(
        db, select(func.count(SubscriptionModel.id)).where(SubscriptionModel.channel_id == channel_id)
    )
    total_views = await count(
        db, select(func.coalesce(func.sum(VideoModel.views), 0)).where(VideoModel.owner_id == channel_id)
    )
    total_likes = await count(
        db,
        select(func.count(LikeDislikeModel.id))
        .select_from(LikeDislikeModel)
        .join(
            VideoModel,
            and_(
                LikeDislikeModel.target_kind == TargetKind.VIDEO,
                LikeDislikeModel.target_id == VideoModel.id,
            )
        )
        .where(
            VideoModel.owner_id == channel_id,
            LikeDislikeModel.type == InteractionType.LIKE,
        )
    )

    return {
        "totalVideos": total_videos,
        "totalSubscribers": total_subscribers,
        "totalViews": total_views,
        "totalLikes": total_likes,
    }


async def channel_videos(db: AsyncSession, channel_id: int, page: Page) -> dict:
    """Every video of the channel (published or not), newest first, with like/dislike totals."""
    counts = reaction_counts(TargetKind.VIDEO)

    result = await db.execute(
        select(
            VideoModel.id,
            VideoModel.thumbnail,
            VideoModel.title,
            VideoModel.is_published,
            VideoModel.created_at,
            func.coalesce(counts.c.likes, 0).label("total_likes"),
            func.coalesce(counts.c.dislikes, 0).label("total_dislikes"),
        )
        .outerjoin(counts, counts.c.target_id == VideoModel.id)
        .where(VideoModel.owner_id == channel_id)
        .order_by(VideoModel.created_at.desc(), VideoModel.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )

    videos = [
        {
            "id": row.id,
            "thumbnail": row.thumbnail,
            "title": row.title,
            "isPublished": row.is_published,
            "createdAt": row.created_at,
            "totalLikes": int(row.total_likes),
            "totalDislikes": int(row.total_dislikes),
        }
        for row in result.all()
    ]

    total = await count(db, select(func.count(VideoModel.id)).where(VideoModel.owner_id == channel_id))
    return paginated("videos", videos, "totalVideos", total, page)


async def channel_data(db: AsyncSession, channel_id: int, page: Page) -> dict:
    videos = await channel_videos(db, channel_id, page)
    return {
        "stats": await channel_stats(db, channel_id),
        "videos": {
            "data": videos["videos"],
            "totalVideos": videos["totalVideos"],
            "totalPages": videos["totalPages"],
            "currentPage": videos["currentPage"],
        },
    }


async def public_channel_videos(db: AsyncSession, channel_id: int, page: Page) -> dict:
    """The channel page: published videos only, newest first."""
    criteria = (VideoModel.owner_id == channel_id, VideoModel.is_published.is_(True))

    result = await db.execute(
        select(VideoModel)
        .where(*criteria)
        .order_by(VideoModel.created_at.desc(), VideoModel.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )

    videos = [
        {
            "id": video.id,
            "thumbnail": video.thumbnail,
            "title": video.title,
            "duration": video.duration,
            "views": video.views,
            "createdAt": video.created_at,
        }
        for video in result.scalars().all()
    ]

    total = await count(db, select(func.count(VideoModel.id)).where(*criteria))
    return paginated("videos", videos, "totalVideos", total, page)


async def subscriber_count(db: AsyncSession, channel_id: int) -> int:
    return await count(
        db, select(func.count(SubscriptionModel.id)).where(SubscriptionModel.channel_id == channel_id)
    )


async def owner_details(db: AsyncSession, owner_id: int) -> dict:
    owner = await db.get(UserModel, owner_id)
    if owner is None:
        raise NotFound("Owner not found")

    return {
        **user_card(owner),
        "totalSubscribers": await subscriber_count(db, owner_id),
    }


async def channel_profile(db: AsyncSession, username: str, actor_id: int | None) -> dict:
    channel = await db.scalar(
        select(UserModel).where(UserModel.username == username.strip().lower())
    )
    if channel is None:
        raise NotFound("Channel does not exist")

    subscribed_to_count = await count(
        db, select(func.count(SubscriptionModel.id)).where(SubscriptionModel.subscriber_id == channel.id)
    )
    is_subscribed = False
    if actor_id is not None:
        is_subscribed = await db.scalar(
            select(SubscriptionModel.id).where(
                SubscriptionModel.subscriber_id == actor_id,
                SubscriptionModel.channel_id == channel.id,
            )
        ) is not None

    return {
        **user_card(channel),
        "email": channel.email,
        "coverImage": channel.cover_image,
        "subscribersCount": await subscriber_count(db, channel.id),
        "subscribedToCount": subscribed_to_count,
        "isSubscribed": is_subscribed,
    }
