from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.model.comment import CommentModel
from app.model.like_dislike import TargetKind
from app.model.tweet import TweetModel
from app.model.user import UserModel
from app.service.aggregate.common import reaction_counts, count, paginated
from app.utility.pagination import Page
from app.utility.serializer import user_card


async def video_comments(db: AsyncSession, video_id: int, page: Page) -> dict:
    counts = reaction_counts(TargetKind.COMMENT)

    result = await db.execute(
        select(
            CommentModel,
            UserModel,
            func.coalesce(counts.c.likes, 0),
            func.coalesce(counts.c.dislikes, 0),
        )
        .join(UserModel, UserModel.id == CommentModel.owner_id)
        .outerjoin(counts, counts.c.target_id == CommentModel.id)
        .where(CommentModel.video_id == video_id)
        .order_by(CommentModel.created_at.desc(), CommentModel.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )

    comments = [
        {
            "id": comment.id,
            "content": comment.content,
            "video": comment.video_id,
            "owner": user_card(owner),
            "likeCount": int(likes),
            "dislikeCount": int(dislikes),
            "createdAt": comment.created_at,
            "updatedAt": comment.updated_at,
        }
        for comment, owner, likes, dislikes in result.all()
    ]

    total = await count(db, select(func.count(CommentModel.id)).where(CommentModel.video_id == video_id))
    return paginated("comments", comments, "totalComments", total, page)


async def user_tweets(db: AsyncSession, user_id: int, page: Page) -> dict:
    counts = reaction_counts(TargetKind.TWEET)

    result = await db.execute(
        select(
            TweetModel,
            UserModel,
            func.coalesce(counts.c.likes, 0),
            func.coalesce(counts.c.dislikes, 0),
        )
        .join(UserModel, UserModel.id == TweetModel.owner_id)
        .outerjoin(counts, counts.c.target_id == TweetModel.id)
        .where(TweetModel.owner_id == user_id)
        .order_by(TweetModel.created_at.desc(), TweetModel.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )

    tweets = [
        {
            "id": tweet.id,
            "content": tweet.content,
            "owner": user_card(owner),
            "likeCount": int(likes),
            "dislikeCount": int(dislikes),
            "createdAt": tweet.created_at,
            "updatedAt": tweet.updated_at,
        }
        for tweet, owner, likes, dislikes in result.all()
    ]

    total = await count(db, select(func.count(TweetModel.id)).where(TweetModel.owner_id == user_id))
    return paginated("tweets", tweets, "totalTweets", total, page)
