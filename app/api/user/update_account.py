from typing import Optional

from fastapi import HTTPException, status, Depends
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_user as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.utility.response import ApiResponse
from app.utility.schema import CamelModel
from app.utility.serializer import user_profile


class UpdateAccountRequest(CamelModel):
    full_name: Optional[str] = None
    email: Optional[str] = None


@router.patch("/update/account-details")
async def update_account(
        data: UpdateAccountRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    full_name = (data.full_name or "").strip()
    email = (data.email or "").strip()

    if not full_name or not email:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="All fields are required"
        )

    taken = await db.scalar(
        select(UserModel.id).where(UserModel.email == email, UserModel.id != user.id)
    )
    if taken:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email is already in use"
        )

    user.full_name = full_name
    user.email = email

    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email is already in use"
        )

    await db.refresh(user)
    return ApiResponse(status.HTTP_200_OK, user_profile(user), "Account details updated successfully")
