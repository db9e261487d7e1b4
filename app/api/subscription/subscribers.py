from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_subscription as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.subscription import channel_subscribers
from app.utility.identifier import parse_id
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/c/{channel_id}/subscribers")
async def subscribers(
        channel_id: str,
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await channel_subscribers(db, parse_id(channel_id, "Channel"), user.id, page)
    return ApiResponse(status.HTTP_200_OK, result, "Subscribers fetched successfully")
