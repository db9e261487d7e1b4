from sqlalchemy import select, func, case
from sqlalchemy.ext.asyncio import AsyncSession

from app.model.like_dislike import LikeDislikeModel, TargetKind, InteractionType
from app.model.subscription import SubscriptionModel
from app.utility.pagination import Page


def reaction_counts(target_kind: TargetKind):
    """Per-target like/dislike totals, to be outer-joined on target_id."""
    return (
        select(
            LikeDislikeModel.target_id.label("target_id"),
            func.sum(case((LikeDislikeModel.type == InteractionType.LIKE, 1), else_=0)).label("likes"),
            func.sum(case((LikeDislikeModel.type == InteractionType.DISLIKE, 1), else_=0)).label("dislikes"),
        )
        .where(LikeDislikeModel.target_kind == target_kind)
        .group_by(LikeDislikeModel.target_id)
        .subquery()
    )


async def subscribed_by(db: AsyncSession, subscriber_id: int, channel_ids: list[int]) -> set[int]:
    """Which of `channel_ids` the subscriber follows, in one query for the whole page."""
    if subscriber_id is None or not channel_ids:
        return set()

    result = await db.execute(
        select(SubscriptionModel.channel_id).where(
            SubscriptionModel.subscriber_id == subscriber_id,
            SubscriptionModel.channel_id.in_(channel_ids),
        )
    )
    return set(result.scalars().all())


async def count(db: AsyncSession, stmt) -> int:
    return int(await db.scalar(stmt) or 0)


def paginated(items_key: str, items: list, total_key: str, total: int, page: Page) -> dict:
    return {
        items_key: items,
        total_key: total,
        "totalPages": page.total_pages(total),
        "currentPage": page.page,
    }
