from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_subscription as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.interaction import toggle_subscription as toggle
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


@router.post("/c/{channel_id}")
async def toggle_subscription(
        channel_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    channel_pk = parse_id(channel_id, "Channel")
    result = await toggle(db, user.id, channel_pk)

    if result.is_subscribed:
        return ApiResponse(
            status.HTTP_201_CREATED,
            {"channel": channel_pk, "subscriber": user.id, "isSubscribed": True},
            "Subscription subscribed successfully"
        )

    return ApiResponse(status.HTTP_200_OK, {"isSubscribed": False}, "Subscription unsubscribed successfully")
