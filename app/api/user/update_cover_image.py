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


@router.patch("/update/cover-image")
async def update_cover_image(
        cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db),
        media: MediaHost = Depends(get_media_host)
):
    if cover_image is None or not cover_image.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cover image file is required"
        )

    uploaded = await media.upload(cover_image, media_folder(user.id), MediaKind.IMAGE)
    if not uploaded:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Something went wrong while uploading cover image"
        )

    previous_cover = user.cover_image
    user.cover_image = uploaded.url
    await db.commit()
    await db.refresh(user)

    # users registered without a cover image have nothing to remove
    if previous_cover and not await media.delete_by_url(previous_cover, MediaKind.IMAGE):
        logger.warning(f"Old cover image of user {user.id} left in storage: {previous_cover}")

    return ApiResponse(status.HTTP_200_OK, user_profile(user), "Cover image updated successfully")
