from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_video as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.channel import public_channel_videos
from app.utility.identifier import parse_id
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/channel/{channel_id}/videos")
async def channel_videos(
        channel_id: str,
        page: Page = Depends(page_params(4)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    videos = await public_channel_videos(db, parse_id(channel_id, "Channel"), page)
    return ApiResponse(status.HTTP_200_OK, videos, "Channel videos fetched successfully")
