import logging
import uuid
from typing import Optional

from fastapi import UploadFile, File, Form, HTTPException, status, Depends
from sqlalchemy import select, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.router_base import router_user as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.utility.response import ApiResponse
from app.utility.security import hash_password
from app.utility.serializer import user_profile
from app.utility.storage import MediaHost, MediaKind, get_media_host, media_folder

logger = logging.getLogger("uvicorn")

# bcrypt only looks at the first 72 bytes
MAX_PASSWORD_BYTES = 72


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
        username: str = Form(""),
        email: str = Form(""),
        full_name: str = Form("", alias="fullName"),
        password: str = Form(""),
        avatar: Optional[UploadFile] = File(None),
        cover_image: Optional[UploadFile] = File(None, alias="coverImage"),
        db: AsyncSession = Depends(get_db),
        media: MediaHost = Depends(get_media_host)
):
    if any(not field.strip() for field in (username, email, full_name, password)):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All fields are required"
        )

    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
        )

    username = username.strip().lower()
    email = email.strip()

    existing_user = await db.scalar(
        select(UserModel.id).where(or_(UserModel.username == username, UserModel.email == email))
    )
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with email or username already exists"
        )

    if avatar is None or not avatar.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Avatar file is required"
        )

    # uploads go first so no row or index lock is held while the media host works
    folder = media_folder("profiles", uuid.uuid4().hex)
    uploaded_avatar = await media.upload(avatar, folder, MediaKind.IMAGE)
    if not uploaded_avatar:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Avatar upload failed"
        )

    cover_url = ""
    if cover_image is not None and cover_image.filename:
        uploaded_cover = await media.upload(cover_image, folder, MediaKind.IMAGE)
        if uploaded_cover:
            cover_url = uploaded_cover.url

    user = UserModel(
        username=username,
        email=email,
        full_name=full_name.strip(),
        password=hash_password(password),
        avatar=uploaded_avatar.url,
        cover_image=cover_url,
    )
    db.add(user)

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        await media.delete_folder(folder)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with email or username already exists"
        )
    await db.refresh(user)

    logger.info(f"user {user.id} registered as {user.username}")
    return ApiResponse(status.HTTP_201_CREATED, user_profile(user), "User registered successfully")
