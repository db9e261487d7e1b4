from fastapi import HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.comment.add import CommentRequest
from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_comment as router
from app.db.dependency import get_db
from app.model.comment import CommentModel
from app.model.user import UserModel
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.serializer import comment_dict


@router.patch("/update/{comment_id}")
async def update_comment(
        comment_id: str,
        data: CommentRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    comment_pk = parse_id(comment_id, "Comment")

    if not data.content or not data.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Comment content is required"
        )

    comment = await load_owned(
        db, CommentModel, comment_pk, user,
        not_found="Comment not found",
        forbidden="You are not allowed to update this comment"
    )

    comment.content = data.content.strip()
    await db.commit()
    await db.refresh(comment)

    return ApiResponse(status.HTTP_200_OK, comment_dict(comment), "Comment updated successfully")
