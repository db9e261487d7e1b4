from fastapi import status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_tweet as router
from app.api.tweet.create import TweetRequest, require_content
from app.db.dependency import get_db
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.serializer import tweet_dict


@router.patch("/{tweet_id}")
async def update_tweet(
        tweet_id: str,
        data: TweetRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    tweet_pk = parse_id(tweet_id, "Tweet")
    content = require_content(data)

    tweet = await load_owned(
        db, TweetModel, tweet_pk, user,
        not_found="Tweet not found",
        forbidden="You are not allowed to update this tweet"
    )

    tweet.content = content
    await db.commit()
    await db.refresh(tweet)

    return ApiResponse(status.HTTP_200_OK, tweet_dict(tweet), "Tweet updated successfully")
