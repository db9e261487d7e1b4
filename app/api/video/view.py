from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.history import record_view
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.serializer import video_dict


@router.post("/{video_id}/view")
async def view_video(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video, counted = await record_view(db, parse_id(video_id, "Video"), user.id)

    message = "View count incremented successfully" if counted else "User has already viewed this video"
    return ApiResponse(status.HTTP_200_OK, video_dict(video), message)
