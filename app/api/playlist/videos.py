from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.playlist.detail import load_visible
from app.api.router_base import router_playlist as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.playlist import playlist_videos as load_playlist_videos
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/{playlist_id}/videos")
async def playlist_videos(
        playlist_id: str,
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await load_visible(db, playlist_id, user)
    videos = await load_playlist_videos(db, playlist.id, page)
    return ApiResponse(status.HTTP_200_OK, videos, "Playlist videos fetched successfully")
