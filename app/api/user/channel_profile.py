from fastapi import HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_user as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.channel import channel_profile as load_channel_profile
from app.utility.response import ApiResponse


@router.get("/channel/{username}")
async def channel_profile(
        username: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    if not username.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username is required"
        )

    profile = await load_channel_profile(db, username, user.id)
    return ApiResponse(status.HTTP_200_OK, profile, "Channel profile fetched successfully")
