from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_like as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.interaction import get_status, parse_target_kind
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


@router.get("/{target_kind}/{target_id}/like-status")
async def like_status(
        target_kind: str,
        target_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    kind = parse_target_kind(target_kind)
    current = await get_status(db, user.id, kind, parse_id(target_id, kind.value.capitalize()))

    return ApiResponse(
        status.HTTP_200_OK,
        {"status": current.value if current else None},
        f"{kind.value.capitalize()} like/dislike status retrieved successfully"
    )
