from typing import Optional

from fastapi import Query, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.catalog import published_videos
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("")
async def browse_videos(
        page: Page = Depends(page_params(9)),
        query: str = "",
        user_id: Optional[str] = Query(None, alias="userId"),
        sort_by: str = Query("createdAt", alias="sortBy"),
        sort_type: str = Query("desc", alias="sortType"),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    # a malformed userId is ignored rather than rejected
    owner_id = None
    if user_id and user_id.isascii() and user_id.isdigit():
        owner_id = int(user_id)

    videos = await published_videos(db, page, query.strip(), owner_id, sort_by, sort_type)
    return ApiResponse(status.HTTP_200_OK, videos, "Videos fetched successfully")
