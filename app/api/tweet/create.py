import logging
from typing import Optional

from fastapi import HTTPException, status, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user
from app.api.router_base import router_tweet as router
from app.db.dependency import get_db
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.utility.response import ApiResponse
from app.utility.serializer import tweet_dict

logger = logging.getLogger("uvicorn")


class TweetRequest(BaseModel):
    content: Optional[str] = None


def require_content(data: TweetRequest) -> str:
    if not data.content or not data.content.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Tweet content is required"
        )
    return data.content.strip()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_tweet(
        data: TweetRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    tweet = TweetModel(content=require_content(data), owner_id=user.id)
    db.add(tweet)
    await db.commit()
    await db.refresh(tweet)

    logger.info(f"tweet {tweet.id} created by user {user.id}")
    return ApiResponse(status.HTTP_201_CREATED, tweet_dict(tweet), "Tweet created successfully")
