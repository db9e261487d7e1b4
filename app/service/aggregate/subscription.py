from sqlalchemy import select, func, or_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from app.model.subscription import SubscriptionModel
from app.model.user import UserModel
from app.service.aggregate.catalog import like_pattern
from app.service.aggregate.common import subscribed_by, count, paginated
from app.service.errors import NotFound
from app.utility.pagination import Page


async def channel_subscribers(db: AsyncSession, channel_id: int, actor_id: int, page: Page) -> dict:
    """
    Users subscribed to a channel, newest subscription first.

    isSubscribedByMe tells whether the requesting user follows each listed subscriber back.
    """
    if await db.get(UserModel, channel_id) is None:
        raise NotFound("Channel not found")

    result = await db.execute(
        select(UserModel)
        .join(SubscriptionModel, SubscriptionModel.subscriber_id == UserModel.id)
        .where(SubscriptionModel.channel_id == channel_id)
        .order_by(SubscriptionModel.created_at.desc(), SubscriptionModel.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )
    users = result.scalars().all()
    mine = await subscribed_by(db, actor_id, [user.id for user in users])

    subscribers = [
        {
            "subscriber": user.id,
            "username": user.username,
            "fullName": user.full_name,
            "avatar": user.avatar,
            "isSubscribedByMe": user.id in mine,
        }
        for user in users
    ]

    total = await count(
        db, select(func.count(SubscriptionModel.id)).where(SubscriptionModel.channel_id == channel_id)
    )
    return paginated("subscribers", subscribers, "totalSubscribers", total, page)


async def subscribed_channels(
        db: AsyncSession,
        user_id: int,
        actor_id: int,
        page: Page,
        search: str | None = None,
) -> dict:
    """Channels `user_id` follows, optionally filtered by name, each with its subscriber total."""
    criteria = [SubscriptionModel.subscriber_id == user_id]
    if search:
        pattern = like_pattern(search)
        criteria.append(or_(
            UserModel.full_name.ilike(pattern, escape="\\"),
            UserModel.username.ilike(pattern, escape="\\"),
        ))

    followers = aliased(SubscriptionModel)
    total_subscribers = (
        select(func.count(followers.id))
        .where(followers.channel_id == UserModel.id)
        .correlate(UserModel)
        .scalar_subquery()
    )

    result = await db.execute(
        select(UserModel, total_subscribers.label("total_subscribers"))
        .join(SubscriptionModel, SubscriptionModel.channel_id == UserModel.id)
        .where(*criteria)
        .order_by(SubscriptionModel.created_at.desc(), SubscriptionModel.id.desc())
        .offset(page.offset)
        .limit(page.limit)
    )
    rows = result.all()
    mine = await subscribed_by(db, actor_id, [channel.id for channel, _ in rows])

    channels = [
        {
            "id": channel.id,
            "username": channel.username,
            "fullName": channel.full_name,
            "avatar": channel.avatar,
            "totalSubscribers": subscribers,
            "isSubscribedByMe": channel.id in mine,
        }
        for channel, subscribers in rows
    ]

    total = await count(
        db,
        select(func.count(SubscriptionModel.id))
        .select_from(SubscriptionModel)
        .join(UserModel, UserModel.id == SubscriptionModel.channel_id)
        .where(*criteria)
    )
    return paginated("subscribedChannels", channels, "totalSubscribedChannels", total, page)
