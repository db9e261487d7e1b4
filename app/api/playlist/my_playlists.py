from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_playlist as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.playlist import user_playlists
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/my-playlists")
async def my_playlists(
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlists = await user_playlists(db, user.id, page, include_private=True)
    return ApiResponse(status.HTTP_200_OK, playlists, "Playlists fetched successfully")
