from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_comment as router
from app.db.dependency import get_db
from app.model.comment import CommentModel
from app.model.user import UserModel
from app.service.cascade import purge_comment
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


@router.delete("/delete/{comment_id}")
async def delete_comment(
        comment_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    comment = await load_owned(
        db, CommentModel, parse_id(comment_id, "Comment"), user,
        not_found="Comment not found",
        forbidden="You are not allowed to delete this comment"
    )

    await purge_comment(db, comment)
    await db.commit()

    return ApiResponse(status.HTTP_200_OK, {}, "Comment deleted successfully")
