from typing import Optional

from fastapi import Query, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_subscription as router
from app.api.subscription.subscribed_channels import subscriber_of
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.subscription import subscribed_channels
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/search/subscribed-channels")
async def search_subscribed_channels(
        search: str = "",
        user_id: Optional[str] = Query(None, alias="userId"),
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    result = await subscribed_channels(db, subscriber_of(user, user_id), user.id, page, search.strip())
    return ApiResponse(status.HTTP_200_OK, result, "Subscribed channels fetched successfully")
