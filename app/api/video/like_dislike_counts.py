from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.like_dislike import TargetKind
from app.model.user import UserModel
from app.service.interaction import count_likes_dislikes
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


@router.get("/{video_id}/like-dislike-counts")
async def like_dislike_counts(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    counts = await count_likes_dislikes(db, TargetKind.VIDEO, parse_id(video_id, "Video"))
    return ApiResponse(status.HTTP_200_OK, counts, "Like and dislike counts fetched successfully")
