from typing import Optional

from fastapi import status, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_like as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.interaction import toggle_like_dislike, parse_target_kind, ToggleAction
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse

MESSAGES = {
    ToggleAction.CREATED: "added",
    ToggleAction.UPDATED: "updated",
    ToggleAction.REMOVED: "removed",
}


class ToggleRequest(BaseModel):
    type: Optional[str] = None


@router.post("/{target_kind}/{target_id}/like-toggle")
async def like_toggle(
        target_kind: str,
        target_id: str,
        data: ToggleRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    kind = parse_target_kind(target_kind)
    result = await toggle_like_dislike(
        db, user.id, kind, parse_id(target_id, kind.value.capitalize()), data.type
    )

    status_code = status.HTTP_201_CREATED if result.action is ToggleAction.CREATED else status.HTTP_200_OK
    return ApiResponse(
        status_code,
        {"status": result.status.value if result.status else None, "action": result.action.value},
        f"{data.type.capitalize()} {MESSAGES[result.action]} successfully"
    )
