from fastapi import HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_comment as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.aggregate.engagement import video_comments
from app.utility.identifier import parse_id
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/video/{video_id}")
async def list_comments(
        video_id: str,
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video_pk = parse_id(video_id, "Video")
    if not await db.get(VideoModel, video_pk):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found"
        )

    comments = await video_comments(db, video_pk, page)
    return ApiResponse(status.HTTP_200_OK, comments, "Comments fetched successfully")
