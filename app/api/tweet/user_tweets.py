from fastapi import HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_tweet as router
from app.db.dependency import get_db
from app.model.user import UserModel
from app.service.aggregate.engagement import user_tweets as load_user_tweets
from app.utility.identifier import parse_id
from app.utility.pagination import Page, page_params
from app.utility.response import ApiResponse


@router.get("/user/{user_id}")
async def user_tweets(
        user_id: str,
        page: Page = Depends(page_params(10)),
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    author_id = parse_id(user_id, "User")
    if not await db.get(UserModel, author_id):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )

    tweets = await load_user_tweets(db, author_id, page)
    return ApiResponse(status.HTTP_200_OK, tweets, "Tweets fetched successfully")
