import logging
from typing import Optional

from fastapi import HTTPException, status, Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_playlist as router
from app.db.dependency import get_db
from app.model.playlist import PlaylistModel
from app.model.user import UserModel
from app.utility.response import ApiResponse
from app.utility.schema import CamelModel
from app.utility.serializer import playlist_dict

logger = logging.getLogger("uvicorn")


class PlaylistRequest(CamelModel):
    name: Optional[str] = None
    description: Optional[str] = None
    is_public: Optional[bool] = None


async def name_taken(db: AsyncSession, owner_id: int, name: str, exclude_id: int | None = None) -> bool:
    """Playlist names are unique per owner, ignoring case."""
    stmt = select(PlaylistModel.id).where(
        PlaylistModel.owner_id == owner_id,
        func.lower(PlaylistModel.name) == name.lower(),
    )
    if exclude_id is not None:
        stmt = stmt.where(PlaylistModel.id != exclude_id)
    return await db.scalar(stmt) is not None


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_playlist(
        data: PlaylistRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    name = (data.name or "").strip()
    if not name:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Playlist name and description are required"
        )

    description = (data.description or "").strip() or f"{name} videos"

    if await name_taken(db, user.id, name):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Playlist with this name already exists"
        )

    playlist = PlaylistModel(
        name=name,
        description=description,
        owner_id=user.id,
        is_public=True if data.is_public is None else data.is_public,
    )
    db.add(playlist)
    await db.commit()
    await db.refresh(playlist)

    logger.info(f"playlist {playlist.id} created by user {user.id}")
    return ApiResponse(status.HTTP_201_CREATED, playlist_dict(playlist, []), "Playlist created successfully")
