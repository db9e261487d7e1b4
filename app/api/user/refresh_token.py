from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_session, set_session_cookie
from app.api.router_base import router_user as router
from app.db.dependency import get_db
from app.model.session import SessionModel
from app.service.session import open_session
from app.utility.response import ApiResponse


@router.post("/refresh-token")
async def refresh_token(
        session: SessionModel = Depends(get_current_session),
        db: AsyncSession = Depends(get_db)
):
    """Rotate the caller's session token, the old one stops working immediately."""
    session_token = await open_session(db, session.user_id)

    response = ApiResponse(
        status.HTTP_200_OK,
        {"sessionToken": session_token},
        "Session refreshed successfully"
    )
    set_session_cookie(response, session_token)
    return response
