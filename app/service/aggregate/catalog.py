from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.aggregate.channel import subscriber_count
from app.service.aggregate.common import count, paginated
from app.service.errors import NotFound
from app.utility.pagination import Page
from app.utility.serializer import user_card

SORT_COLUMNS = {
    "createdAt": VideoModel.created_at,
    "views": VideoModel.views,
    "duration": VideoModel.duration,
    "title": VideoModel.title,
}


def like_pattern(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


async def published_videos(
        db: AsyncSession,
        page: Page,
        query: str = "",
        owner_id: int | None = None,
        sort_by: str = "createdAt",
        sort_type: str = "desc",
) -> dict:
    """Browse/search published videos, optionally limited to one owner."""
    criteria = [VideoModel.is_published.is_(True)]
    if query:
        pattern = like_pattern(query)
        criteria.append(or_(
            VideoModel.title.ilike(pattern, escape="\\"),
            VideoModel.description.ilike(pattern, escape="\\"),
        ))
    if owner_id is not None:
        criteria.append(VideoModel.owner_id == owner_id)

    column = SORT_COLUMNS.get(sort_by, VideoModel.created_at)
    if sort_type == "asc":
        ordering = (column.asc(), VideoModel.id.asc())
    else:
        ordering = (column.desc(), VideoModel.id.desc())

    result = await db.execute(
        select(VideoModel, UserModel)
        .join(UserModel, UserModel.id == VideoModel.owner_id)
        .where(*criteria)
        .order_by(*ordering)
        .offset(page.offset)
        .limit(page.limit)
    )

    videos = [
        {
            "id": video.id,
            "title": video.title,
            "description": video.description,
            "thumbnail": video.thumbnail,
            "views": video.views,
            "duration": video.duration,
            "createdAt": video.created_at,
            "owner": user_card(owner),
        }
        for video, owner in result.all()
    ]

    total = await count(db, select(func.count(VideoModel.id)).where(*criteria))
    return paginated("videos", videos, "totalVideos", total, page)


async def video_detail(db: AsyncSession, video_id: int) -> dict:
    row = (await db.execute(
        select(VideoModel, UserModel)
        .join(UserModel, UserModel.id == VideoModel.owner_id)
        .where(VideoModel.id == video_id)
    )).first()

    if row is None:
        raise NotFound("Video does not exist")

    video, owner = row
    return {
        "videoId": video.id,
        "videoFile": video.video_file,
        "thumbnail": video.thumbnail,
        "title": video.title,
        "description": video.description,
        "duration": video.duration,
        "views": video.views,
        "isPublished": video.is_published,
        "createdAt": video.created_at,
        "ownerId": owner.id,
        "ownerName": owner.full_name,
        "ownerAvatar": owner.avatar,
        "ownerUsername": owner.username,
        "totalSubscribers": await subscriber_count(db, owner.id),
    }
