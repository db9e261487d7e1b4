"""
"Up next" list for a video.

A heuristic, not a ranking: candidates are drawn from four sources in a fixed
order and the first occurrence of each video wins.
"""
import re

from sqlalchemy import select, or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.model.user import UserModel
from app.model.video import VideoModel
from app.model.watch_history import WatchHistoryModel
from app.service.aggregate.catalog import like_pattern
from app.service.errors import NotFound, Forbidden

PER_SOURCE_LIMIT = 5
MAX_RECOMMENDATIONS = 10
MAX_TOKENS = 20


def tokenize(text: str) -> list[str]:
    """Distinct whitespace separated words, case-insensitive, first occurrence order."""
    seen = []
    for token in re.split(r"\s+", text or ""):
        token = token.strip()
        if token and token.lower() not in (t.lower() for t in seen):
            seen.append(token)
    return seen[:MAX_TOKENS]


def _card(video: VideoModel, owner: UserModel) -> dict:
    return {
        "videoId": video.id,
        "thumbnail": video.thumbnail,
        "title": video.title,
        "duration": video.duration,
        "views": video.views,
        "createdAt": video.created_at,
        "ownerId": owner.id,
        "ownerAvatar": owner.avatar,
        "ownerName": owner.full_name,
        "ownerUsername": owner.username,
    }


async def recommended_videos(db: AsyncSession, video_id: int, actor_id: int | None = None) -> list[dict]:
    current = await db.get(VideoModel, video_id)
    if current is None:
        raise NotFound("The requested video does not exist")

    if not current.is_published:
        raise Forbidden("This video is not available for viewing")

    candidates = (
        select(VideoModel, UserModel)
        .join(UserModel, UserModel.id == VideoModel.owner_id)
        .where(VideoModel.id != video_id, VideoModel.is_published.is_(True))
    )
    newest = (VideoModel.created_at.desc(), VideoModel.id.desc())

    sources = [
        candidates
        .where(VideoModel.owner_id == current.owner_id)
        .order_by(*newest)
        .limit(PER_SOURCE_LIMIT),
    ]

    matches = [
        VideoModel.title.ilike(like_pattern(token), escape="\\") for token in tokenize(current.title)
    ] + [
        VideoModel.description.ilike(like_pattern(token), escape="\\") for token in tokenize(current.description)
    ]
    if matches:
        sources.append(candidates.where(or_(*matches)).order_by(*newest).limit(PER_SOURCE_LIMIT))

    sources.append(
        candidates.order_by(VideoModel.views.desc(), VideoModel.id.desc()).limit(PER_SOURCE_LIMIT)
    )

    if actor_id is not None:
        sources.append(
            candidates
            .join(WatchHistoryModel, WatchHistoryModel.video_id == VideoModel.id)
            .where(WatchHistoryModel.user_id == actor_id)
            .order_by(WatchHistoryModel.id)
            .limit(MAX_RECOMMENDATIONS)
        )

    recommendations = []
    seen = set()
    for stmt in sources:
        for video, owner in (await db.execute(stmt)).all():
            if video.id in seen:
                continue
            seen.add(video.id)
            recommendations.append(_card(video, owner))

    return recommendations[:MAX_RECOMMENDATIONS]
