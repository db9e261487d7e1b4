import logging
from typing import Optional

from fastapi import HTTPException, status, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_comment as router
from app.db.dependency import get_db
from app.model.comment import CommentModel
from app.model.user import UserModel
from app.model.video import VideoModel
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.serializer import comment_dict

logger = logging.getLogger("uvicorn")


class CommentRequest(BaseModel):
    content: Optional[str] = None


@router.post("/{video_id}", status_code=status.HTTP_201_CREATED)
async def add_comment(
        video_id: str,
        data: CommentRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video_pk = parse_id(video_id, "Video")

    if not data.content or not data.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment content is required"
        )

    if not await db.get(VideoModel, video_pk):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found"
        )

    comment = CommentModel(content=data.content.strip(), video_id=video_pk, owner_id=user.id)
    db.add(comment)
    await db.commit()
    await db.refresh(comment)

    logger.info(f"comment {comment.id} added to video {video_pk} by user {user.id}")
    return ApiResponse(status.HTTP_201_CREATED, comment_dict(comment), "Comment added successfully")
