import logging
from typing import Optional

from fastapi import UploadFile, File, Form, HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.model.video import VideoModel
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.serializer import video_dict
from app.utility.storage import MediaHost, MediaKind, get_media_host

logger = logging.getLogger("uvicorn")


@router.patch("/{video_id}/update")
async def update_video(
        video_id: str,
        title: Optional[str] = Form(None),
        description: Optional[str] = Form(None),
        thumbnail: Optional[UploadFile] = File(None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        media: MediaHost = Depends(get_media_host)
):
    video = await load_owned(
        db, VideoModel, parse_id(video_id, "Video"), user,
        not_found="Video does not exist",
        forbidden="Unauthorized to update this video"
    )

    previous_thumbnail = None
    if thumbnail is not None and thumbnail.filename:
        uploaded = await media.upload(thumbnail, video.asset_folder, MediaKind.IMAGE)
        if not uploaded:
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail="Something went wrong while uploading thumbnail"
            )
        previous_thumbnail = video.thumbnail
        video.thumbnail = uploaded.url

    if title and title.strip():
        video.title = title.strip()
    if description and description.strip():
        video.description = description.strip()

    await db.commit()
    await db.refresh(video)

    if previous_thumbnail and not await media.delete_by_url(previous_thumbnail, MediaKind.IMAGE):
        logger.warning(f"Old thumbnail of video {video.id} left in storage: {previous_thumbnail}")

    return ApiResponse(status.HTTP_200_OK, video_dict(video), "Video details updated successfully")
