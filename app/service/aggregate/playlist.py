"""
Playlist read models.

Membership order is the stored `position`, so paging through a playlist
always walks it in the order videos were added.
"""
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.model.playlist import PlaylistModel, PlaylistVideoModel
from app.model.subscription import SubscriptionModel
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.aggregate.common import count, paginated
from app.service.errors import NotFound
from app.utility.pagination import Page


def _total_videos():
    return (
        select(func.count(PlaylistVideoModel.id))
        .where(PlaylistVideoModel.playlist_id == PlaylistModel.id)
        .correlate(PlaylistModel)
        .scalar_subquery()
    )


def _first_thumbnail():
    return (
        select(VideoModel.thumbnail)
        .join(PlaylistVideoModel, PlaylistVideoModel.video_id == VideoModel.id)
        .where(PlaylistVideoModel.playlist_id == PlaylistModel.id)
        .order_by(PlaylistVideoModel.position, PlaylistVideoModel.id)
        .limit(1)
        .correlate(PlaylistModel)
        .scalar_subquery()
    )


async def playlist_video_ids(db: AsyncSession, playlist_id: int) -> list[int]:
    result = await db.execute(
        select(PlaylistVideoModel.video_id)
        .where(PlaylistVideoModel.playlist_id == playlist_id)
        .order_by(PlaylistVideoModel.position, PlaylistVideoModel.id)
    )
    return list(result.scalars().all())


async def playlist_detail(db: AsyncSession, playlist_id: int) -> dict:
    owner_subscribers = (
        select(func.count(SubscriptionModel.id))
        .where(SubscriptionModel.channel_id == PlaylistModel.owner_id)
        .correlate(PlaylistModel)
        .scalar_subquery()
    )

    row = (await db.execute(
        select(
            PlaylistModel,
            UserModel,
            _total_videos().label("total_videos"),
            _first_thumbnail().label("first_thumbnail"),
            owner_subscribers.label("owner_subscribers"),
        )
        .join(UserModel, UserModel.id == PlaylistModel.owner_id)
        .where(PlaylistModel.id == playlist_id)
    )).first()

    if row is None:
        raise NotFound("Playlist not found")

    playlist, owner, total_videos, first_thumbnail, owner_subscribers = row
    return {
        "id": playlist.id,
        "name": playlist.name,
        "description": playlist.description,
        "isPublic": playlist.is_public,
        "createdAt": playlist.created_at,
        "totalVideos": total_videos,
        "firstVideoThumbnail": first_thumbnail,
        "ownerId": owner.id,
        "ownerAvatar": owner.avatar,
        "ownerName": owner.full_name,
        "ownerUsername": owner.username,
        "ownerTotalSubscribers": owner_subscribers,
    }


async def playlist_videos(db: AsyncSession, playlist_id: int, page: Page) -> dict:
    result = await db.execute(
        select(VideoModel, UserModel)
        .select_from(PlaylistVideoModel)
        .join(VideoModel, VideoModel.id == PlaylistVideoModel.video_id)
        .join(UserModel, UserModel.id == VideoModel.owner_id)
        .where(PlaylistVideoModel.playlist_id == playlist_id)
        .order_by(PlaylistVideoModel.position, PlaylistVideoModel.id)
        .offset(page.offset)
        .limit(page.limit)
    )

    videos = [
        {
            "videoId": video.id,
            "videoThumbnail": video.thumbnail,
            "videoDuration": video.duration,
            "videoTitle": video.title,
            "videoViews": video.views,
            "videoCreatedAt": video.created_at,
            "videoOwnerId": owner.id,
            "videoOwnerAvatar": owner.avatar,
            "videoOwnerName": owner.full_name,
            "videoOwnerUsername": owner.username,
        }
        for video, owner in result.all()
    ]

    total = await count(
        db, select(func.count(PlaylistVideoModel.id)).where(PlaylistVideoModel.playlist_id == playlist_id)
    )
    return paginated("playlistVideos", videos, "totalVideos", total, page)


async def user_playlists(db: AsyncSession, owner_id: int, page: Page, include_private: bool = False) -> dict:
    criteria = [PlaylistModel.owner_id == owner_id]
    if not include_private:
        criteria.append(PlaylistModel.is_public.is_(True))

    result = await db.execute(
        select(
            PlaylistModel,
            _total_videos().label("total_videos"),
            _first_thumbnail().label("first_thumbnail"),
        )
        .where(*criteria)
        .order_by(PlaylistModel.created_at.desc(), PlaylistModel.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )

    playlists = [
        {
            "id": playlist.id,
            "name": playlist.name,
            "description": playlist.description,
            "isPublic": playlist.is_public,
            "createdAt": playlist.created_at,
            "totalVideos": total_videos,
            "firstVideoThumbnail": first_thumbnail,
        }
        for playlist, total_videos, first_thumbnail in result.all()
    ]

    total = await count(db, select(func.count(PlaylistModel.id)).where(*criteria))
    return paginated("playlists", playlists, "totalPlaylists", total, page)
