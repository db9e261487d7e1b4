from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_session, clear_session_cookie
from app.api.router_base import router_user as router
from app.db.dependency import get_db
from app.model.session import SessionModel
from app.utility.response import ApiResponse


@router.post("/logout")
async def logout(
        session: SessionModel = Depends(get_current_session),
        db: AsyncSession = Depends(get_db)
):
    await db.delete(session)
    await db.commit()

    response = ApiResponse(status.HTTP_200_OK, {}, "User logged out successfully")
    clear_session_cookie(response)
    return response
