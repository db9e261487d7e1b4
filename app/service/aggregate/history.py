import logging

from sqlalchemy import select, func, update, and_
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import insert_for
from app.model.like_dislike import LikeDislikeModel, TargetKind, InteractionType
from app.model.user import UserModel
from app.model.video import VideoModel
from app.model.watch_history import WatchHistoryModel
from app.service.aggregate.common import count, paginated
from app.service.errors import NotFound
from app.utility.pagination import Page
from app.utility.serializer import user_card

logger = logging.getLogger("uvicorn")


async def record_view(db: AsyncSession, video_id: int, user_id: int) -> tuple[VideoModel, bool]:
    """
    Count a view the first time a user watches a video.

    The history entry and the counter increment commit together, and the unique
    (user, video) entry makes a repeated or concurrent view a no-op.

    Returns:
        (video, counted) where counted is False if the user had already watched it
    """
    video = await db.get(VideoModel, video_id)
    if video is None:
        raise NotFound("Video not found")

    inserted = await db.execute(
        insert_for(db, WatchHistoryModel)
        .values(user_id=user_id, video_id=video_id)
        .on_conflict_do_nothing(index_elements=["user_id", "video_id"])
        .returning(WatchHistoryModel.id)
    )
    counted = inserted.first() is not None

    if counted:
        await db.execute(
            update(VideoModel)
            .where(VideoModel.id == video_id)
            .values(views=VideoModel.views + 1)
            .execution_options(synchronize_session=False)
        )

    await db.commit()
    await db.refresh(video)

    if counted:
        logger.info(f"video {video_id} viewed by user {user_id}, views={video.views}")
    return video, counted


async def watch_history(db: AsyncSession, user_id: int, page: Page) -> dict:
    """The user's history in the order videos were first watched."""
    result = await db.execute(
        select(VideoModel, UserModel)
        .select_from(WatchHistoryModel)
        .join(VideoModel, VideoModel.id == WatchHistoryModel.video_id)
        .join(UserModel, UserModel.id == VideoModel.owner_id)
        .where(WatchHistoryModel.user_id == user_id)
        .order_by(WatchHistoryModel.id)
        .offset(page.offset)
        .limit(page.limit)
    )

    history = [
        {
            "id": video.id,
            "thumbnail": video.thumbnail,
            "duration": video.duration,
            "title": video.title,
            "views": video.views,
            "createdAt": video.created_at,
            "description": video.description,
            "owner": user_card(owner),
        }
        for video, owner in result.all()
    ]

    total = await count(
        db, select(func.count(WatchHistoryModel.id)).where(WatchHistoryModel.user_id == user_id)
    )
    return paginated("watchHistory", history, "totalVideos", total, page)


async def liked_videos(db: AsyncSession, user_id: int, page: Page) -> dict:
    """Videos the user currently likes (dislikes excluded), most recent like first."""
    criteria = (
        LikeDislikeModel.liked_by_id == user_id,
        LikeDislikeModel.type == InteractionType.LIKE,
    )
    on_video = and_(
        LikeDislikeModel.target_kind == TargetKind.VIDEO,
        LikeDislikeModel.target_id == VideoModel.id,
    )

    result = await db.execute(
        select(VideoModel)
        .join(LikeDislikeModel, on_video)
        .where(*criteria)
        .order_by(LikeDislikeModel.created_at.desc(), LikeDislikeModel.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )

    videos = [
        {
            "id": video.id,
            "title": video.title,
            "thumbnail": video.thumbnail,
            "description": video.description,
            "views": video.views,
            "createdAt": video.created_at,
        }
        for video in result.scalars().all()
    ]

    total = await count(
        db,
        select(func.count(LikeDislikeModel.id))
        .select_from(LikeDislikeModel)
        .join(VideoModel, on_video)
        .where(*criteria)
    )
    return paginated("likedVideos", videos, "totalVideos", total, page)
