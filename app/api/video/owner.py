from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.channel import owner_details
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


@router.get("/owner/{owner_id}")
async def video_owner(
        owner_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    owner = await owner_details(db, parse_id(owner_id, "Owner"))
    return ApiResponse(status.HTTP_200_OK, owner, "Owner details fetched successfully")
