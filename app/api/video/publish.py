import logging
import uuid
from typing import Optional

from fastapi import UploadFile, File, Form, HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.model.video import VideoModel
from app.utility.response import ApiResponse
from app.utility.serializer import video_dict
from app.utility.storage import MediaHost, MediaKind, get_media_host, media_folder

logger = logging.getLogger("uvicorn")


@router.post("", status_code=status.HTTP_201_CREATED)
async def publish_video(
        title: str = Form(""),
        description: str = Form(""),
        video_file: Optional[UploadFile] = File(None, alias="videoFile"),
        thumbnail: Optional[UploadFile] = File(None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        media: MediaHost = Depends(get_media_host)
):
    if not title.strip() or not description.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Please provide title and description"
        )

    if video_file is None or not video_file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Video file is required"
        )

    if thumbnail is None or not thumbnail.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Thumbnail file is required"
        )

    folder = media_folder(user.id, uuid.uuid4().hex)

    uploaded_video = await media.upload(video_file, folder, MediaKind.VIDEO)
    if not uploaded_video:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong while uploading video file"
        )

    uploaded_thumbnail = await media.upload(thumbnail, folder, MediaKind.IMAGE)
    if not uploaded_thumbnail:
        await media.delete_folder(folder)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong while uploading thumbnail"
        )

    video = VideoModel(
        owner_id=user.id,
        title=title.strip(),
        description=description.strip(),
        video_file=uploaded_video.url,
        thumbnail=uploaded_thumbnail.url,
        asset_folder=folder,
        duration=uploaded_video.duration or 0,
    )
    db.add(video)
    await db.commit()
    await db.refresh(video)

    logger.info(f"video {video.id} published by user {user.id}")
    return ApiResponse(status.HTTP_201_CREATED, video_dict(video), "Video published successfully")
