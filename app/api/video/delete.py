import logging

from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.cascade import purge_video
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.storage import MediaHost, MediaKind, get_media_host

logger = logging.getLogger("uvicorn")


@router.delete("/{video_id}/delete")
async def delete_video(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        media: MediaHost = Depends(get_media_host)
):
    video = await load_owned(
        db, VideoModel, parse_id(video_id, "Video"), user,
        not_found="Video does not exist",
        forbidden="Unauthorized to delete this video"
    )

    assets = (
        (video.thumbnail, MediaKind.IMAGE),
        (video.video_file, MediaKind.VIDEO),
    )
    folder = video.asset_folder
    deleted_id = video.id

    await purge_video(db, video)
    await db.commit()

    # the row is gone, leftover files are only logged
    for url, kind in assets:
        if not await media.delete_by_url(url, kind):
            logger.warning(f"Failed to delete {kind.value} of video {deleted_id}: {url}")
    if not await media.delete_folder(folder):
        logger.warning(f"Failed to delete media folder {folder}")

    logger.info(f"video {deleted_id} deleted by user {user.id}")
    return ApiResponse(status.HTTP_200_OK, {}, "Video deleted successfully")
