import logging
from typing import Optional

from fastapi import HTTPException, status, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import set_session_cookie
from app.api.router_base import router_user as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.session import open_session
from app.utility.response import ApiResponse
from app.utility.schema import CamelModel
from app.utility.security import verify_password
from app.utility.serializer import user_profile

logger = logging.getLogger("uvicorn")


class LoginRequest(CamelModel):
    username: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


@router.post("/login")
async def login(data: LoginRequest, db: AsyncSession = Depends(get_db)):
    if not data.username and not data.email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Username or email is required"
        )

    if data.username:
        criteria = UserModel.username == data.username.strip().lower()
    else:
        criteria = UserModel.email == data.email.strip()

    result = await db.execute(select(UserModel).where(criteria))
    user = result.scalar_one_or_none()

    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User does not exist"
        )

    if not data.password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Password is required"
        )

    if not verify_password(data.password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid user credentials"
        )

    session_token = await open_session(db, user.id)
    logger.info(f"user {user.id} logged in")

    response = ApiResponse(
        status.HTTP_200_OK,
        {"user": user_profile(user), "sessionToken": session_token},
        "User logged in successfully"
    )
    set_session_cookie(response, session_token)
    return response
