from fastapi import HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_playlist as router
from app.db.dependency import get_db
from app.model.playlist import PlaylistModel
from app.model.user import UserModel
from app.service.aggregate.playlist import playlist_detail
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


async def load_visible(db: AsyncSession, playlist_id: str, user: UserModel) -> PlaylistModel:
    playlist = await db.get(PlaylistModel, parse_id(playlist_id, "Playlist"))
    if not playlist:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Playlist not found"
        )

    if not playlist.is_public and playlist.owner_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This playlist is private"
        )

    return playlist


@router.get("/{playlist_id}")
async def get_playlist(
        playlist_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await load_visible(db, playlist_id, user)
    detail = await playlist_detail(db, playlist.id)
    return ApiResponse(status.HTTP_200_OK, detail, "Playlist fetched successfully")
