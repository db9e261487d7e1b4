from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_tweet as router
from app.db.dependency import get_db
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.service.cascade import purge_tweet
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse


@router.delete("/{tweet_id}")
async def delete_tweet(
        tweet_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    tweet = await load_owned(
        db, TweetModel, parse_id(tweet_id, "Tweet"), user,
        not_found="Tweet not found",
        forbidden="You are not allowed to delete this tweet"
    )

    await purge_tweet(db, tweet)
    await db.commit()

    return ApiResponse(status.HTTP_200_OK, {}, "Tweet deleted successfully")
