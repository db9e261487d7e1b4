"""
Row cleanup for hard deletes.

Foreign keys carry ON DELETE CASCADE, but like/dislike rows reference their
target through (target_kind, target_id) and cannot, so dependants are removed
explicitly. Callers commit.
"""
from sqlalchemy import select, delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.model.comment import CommentModel
from app.model.like_dislike import LikeDislikeModel, TargetKind
from app.model.playlist import PlaylistVideoModel
from app.model.tweet import TweetModel
from app.model.video import VideoModel
from app.model.watch_history import WatchHistoryModel


async def _delete_interactions(db: AsyncSession, target_kind: TargetKind, target_ids):
    await db.execute(
        delete(LikeDislikeModel)
        .where(
            LikeDislikeModel.target_kind == target_kind,
            LikeDislikeModel.target_id.in_(target_ids),
        )
        .execution_options(synchronize_session=False)
    )


async def purge_comment(db: AsyncSession, comment: CommentModel):
    await _delete_interactions(db, TargetKind.COMMENT, [comment.id])
    await db.delete(comment)


async def purge_tweet(db: AsyncSession, tweet: TweetModel):
    await _delete_interactions(db, TargetKind.TWEET, [tweet.id])
    await db.delete(tweet)


async def purge_video(db: AsyncSession, video: VideoModel):
    comment_ids = select(CommentModel.id).where(CommentModel.video_id == video.id)
    await _delete_interactions(db, TargetKind.COMMENT, comment_ids)
    await _delete_interactions(db, TargetKind.VIDEO, [video.id])

    for model, column in (
            (CommentModel, CommentModel.video_id),
            (PlaylistVideoModel, PlaylistVideoModel.video_id),
            (WatchHistoryModel, WatchHistoryModel.video_id),
    ):
        await db.execute(
            delete(model).where(column == video.id).execution_options(synchronize_session=False)
        )

    await db.delete(video)
