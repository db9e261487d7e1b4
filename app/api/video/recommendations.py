from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.recommendation import recommended_videos
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


@router.get("/{video_id}/recommendations")
async def recommendations(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    videos = await recommended_videos(db, parse_id(video_id, "Video"), user.id)
    return ApiResponse(status.HTTP_200_OK, {"videos": videos}, "Recommended videos fetched successfully")
