import logging

from fastapi import HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_user as router
from app.api.user.register import MAX_PASSWORD_BYTES
from app.db.dependency import get_db
from app.model.user import UserModel
from app.utility.response import ApiResponse
from app.utility.schema import CamelModel
from app.utility.security import hash_password, verify_password

logger = logging.getLogger("uvicorn")


class ChangePasswordRequest(CamelModel):
    current_password: str = ""
    new_password: str = ""
    confirm_new_password: str = ""


@router.post("/change-password")
async def change_password(
        data: ChangePasswordRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    if not data.current_password or not data.new_password or not data.confirm_new_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All fields are required"
        )

    if data.new_password != data.confirm_new_password:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="New password and confirm new password do not match"
        )

    if len(data.new_password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Password must be at most {MAX_PASSWORD_BYTES} bytes"
        )

    if not verify_password(data.current_password, user.password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid current password"
        )

    user.password = hash_password(data.new_password)
    await db.commit()

    logger.info(f"user {user.id} changed password")
    return ApiResponse(status.HTTP_200_OK, {}, "Password changed successfully")
