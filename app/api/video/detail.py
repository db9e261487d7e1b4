from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.catalog import video_detail
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


@router.get("/{video_id}")
async def get_video_detail(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    detail = await video_detail(db, parse_id(video_id, "Video"))
    return ApiResponse(status.HTTP_200_OK, detail, "Video fetched successfully")
