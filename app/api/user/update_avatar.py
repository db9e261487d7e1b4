import logging
from typing import Optional

from fastapi import UploadFile, File, HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_user as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.utility.response import ApiResponse
from app.utility.serializer import user_profile
from app.utility.storage import MediaHost, MediaKind, get_media_host, media_folder

logger = logging.getLogger("uvicorn")


@router.patch("/update/avatar")
async def update_avatar(
        avatar: Optional[UploadFile] = File(None),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        media: MediaHost = Depends(get_media_host)
):
    if avatar is None or not avatar.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Avatar file is required"
        )

    uploaded = await media.upload(avatar, media_folder(user.id), MediaKind.IMAGE)
    if not uploaded:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong while uploading avatar"
        )

    previous_avatar = user.avatar
    user.avatar = uploaded.url
    await db.commit()
    await db.refresh(user)

    if previous_avatar and not await media.delete_by_url(previous_avatar, MediaKind.IMAGE):
        logger.warning(f"Old avatar of user {user.id} left in storage: {previous_avatar}")

    return ApiResponse(status.HTTP_200_OK, user_profile(user), "Avatar updated successfully")
