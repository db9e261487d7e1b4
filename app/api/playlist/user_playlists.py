from fastapi import HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_playlist as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.playlist import user_playlists as load_user_playlists
from app.utility.identifier import parse_id
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/user/{user_id}")
async def user_playlists(
        user_id: str,
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    owner_id = parse_id(user_id, "User")
    if not await db.get(UserModel, owner_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    # private playlists are listed for their owner only
    playlists = await load_user_playlists(db, owner_id, page, include_private=owner_id == user.id)
    return ApiResponse(status.HTTP_200_OK, playlists, "Playlists fetched successfully")
