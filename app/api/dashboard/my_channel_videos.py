from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_dashboard as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.channel import channel_videos
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/my-channel/videos")
async def my_channel_videos(
        page: Page = Depends(page_params(5)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await channel_videos(db, user.id, page)
    return ApiResponse(status.HTTP_200_OK, result, "Channel videos fetched successfully")
