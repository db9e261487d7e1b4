from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_like as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.history import liked_videos as load_liked_videos
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/videos")
async def liked_videos(
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    videos = await load_liked_videos(db, user.id, page)
    return ApiResponse(status.HTTP_200_OK, videos, "Liked videos fetched successfully")
