from typing import Optional

from fastapi import Query, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_subscription as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.subscription import subscribed_channels as load_subscribed_channels
from app.utility.identifier import parse_id
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


def subscriber_of(user: UserModel, user_id: Optional[str]) -> int:
    """Whose subscriptions to list, the caller's own unless ?userId= names someone else."""
    if not user_id:
        return user.id
    return parse_id(user_id, "User")


@router.get("/subscribed-channels")
async def subscribed_channels(
        user_id: Optional[str] = Query(None, alias="userId"),
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await load_subscribed_channels(db, subscriber_of(user, user_id), user.id, page)
    return ApiResponse(status.HTTP_200_OK, result, "Subscribed channels fetched successfully")
