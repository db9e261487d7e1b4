from fastapi import status, Depends
from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.model.video import VideoModel
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.serializer import video_dict


@router.patch("/{video_id}/toggle-publish")
async def toggle_publish(
        video_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video = await load_owned(
        db, VideoModel, parse_id(video_id, "Video"), user,
        not_found="Video does not exist",
        forbidden="Unauthorized to update status of this video"
    )

    # flipped in the statement so two quick toggles cannot both read the same value
    await db.execute(
        update(VideoModel)
        .where(VideoModel.id == video.id)
        .values(is_published=~VideoModel.is_published)
        .execution_options(synchronize_session=False)
    )
    await db.commit()
    await db.refresh(video)

    return ApiResponse(status.HTTP_200_OK, video_dict(video), "Publish status toggled successfully")
