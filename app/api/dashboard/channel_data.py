from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_dashboard as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.channel import channel_data as load_channel_data
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/channel/data")
async def channel_data(
        page: Page = Depends(page_params(2)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await load_channel_data(db, user.id, page)
    return ApiResponse(status.HTTP_200_OK, result, "Channel data fetched successfully")
