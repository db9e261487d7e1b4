from fastapi import status, Depends

from app.api.dependency import get_current_user
from app.api.router_base import router_user as router
from app.model.user import UserModel
from app.utility.response import ApiResponse
from app.utility.serializer import user_profile


@router.get("/current")
async def current_user(user: UserModel = Depends(get_current_user)):
    return ApiResponse(status.HTTP_200_OK, {"user": user_profile(user)}, "User fetched successfully")
