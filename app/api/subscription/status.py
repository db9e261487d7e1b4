from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_subscription as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.interaction import is_subscribed
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


@router.get("/c/subscription-status/{channel_id}")
async def subscription_status(
        channel_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    subscribed = await is_subscribed(db, user.id, parse_id(channel_id, "Channel"))
    return ApiResponse(status.HTTP_200_OK, {"isSubscribed": subscribed}, "Subscription status retrieved successfully")
