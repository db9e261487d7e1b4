from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_user as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.history import watch_history as load_watch_history
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/watch-history")
async def watch_history(
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    history = await load_watch_history(db, user.id, page)
    return ApiResponse(status.HTTP_200_OK, history, "Watch history fetched successfully")
