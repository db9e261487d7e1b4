from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_dashboard as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.channel import channel_stats
from app.utility.response import ApiResponse


@router.get("/channel/stats")
async def stats(
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await channel_stats(db, user.id)
    return ApiResponse(status.HTTP_200_OK, result, "Channel stats fetched successfully")
