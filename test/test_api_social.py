from sqlalchemy import select, func

from app.model.comment import CommentModel
from app.model.like_dislike import LikeDislikeModel
from app.model.tweet import TweetModel
from conftest import make_user, make_video, login

API = "/api/v2"


async def test_like_dislike_scenario_and_dashboard(client, db):
    owner = await make_user(db, "author")
    await make_user(db, "fan")
    video = await make_video(db, owner)
    author = await login(client, "author")
    fan = await login(client, "fan")

    liked = await client.post(f"{API}/likedislikes/video/{video.id}/like-toggle", headers=fan, json={"type": "like"})
    assert liked.status_code == 201
    assert liked.json()["data"] == {"status": "like", "action": "created"}
    assert liked.json()["message"] == "Like added successfully"

    disliked = await client.post(
        f"{API}/likedislikes/video/{video.id}/like-toggle", headers=fan, json={"type": "dislike"}
    )
    assert disliked.status_code == 200
    assert disliked.json()["data"]["status"] == "dislike"

    status = await client.get(f"{API}/likedislikes/video/{video.id}/like-status", headers=fan)
    assert status.json()["data"] == {"status": "dislike"}
    assert await db.scalar(select(func.count(LikeDislikeModel.id))) == 1

    stats = await client.get(f"{API}/dashboards/channel/stats", headers=author)
    assert stats.json()["data"]["totalLikes"] == 0

    removed = await client.post(
        f"{API}/likedislikes/video/{video.id}/like-toggle", headers=fan, json={"type": "dislike"}
    )
    assert removed.json()["data"] == {"status": None, "action": "removed"}

    dashboard = await client.get(f"{API}/dashboards/my-channel/videos", headers=author)
    assert dashboard.json()["data"]["totalVideos"] == 1

    data = await client.get(f"{API}/dashboards/channel/data", headers=author)
    assert data.json()["data"]["stats"]["totalVideos"] == 1
    assert len(data.json()["data"]["videos"]["data"]) == 1


async def test_like_toggle_validation(client, db):
    owner = await make_user(db, "owner")
    video = await make_video(db, owner)
    headers = await login(client, "owner")

    bad_type = await client.post(f"{API}/likedislikes/video/{video.id}/like-toggle", headers=headers, json={})
    assert bad_type.status_code == 400

    bad_kind = await client.post(
        f"{API}/likedislikes/playlist/{video.id}/like-toggle", headers=headers, json={"type": "like"}
    )
    assert bad_kind.status_code == 400

    missing = await client.post(f"{API}/likedislikes/tweet/999/like-toggle", headers=headers, json={"type": "like"})
    assert missing.status_code == 404
    assert missing.json()["message"] == "Tweet not found"


async def test_liked_videos_route(client, db):
    owner = await make_user(db, "owner")
    video = await make_video(db, owner)
    headers = await login(client, "owner")
    await client.post(f"{API}/likedislikes/video/{video.id}/like-toggle", headers=headers, json={"type": "like"})

    response = await client.get(f"{API}/likedislikes/videos", headers=headers)

    assert [item["id"] for item in response.json()["data"]["likedVideos"]] == [video.id]


async def test_comment_lifecycle_and_ownership(client, db):
    owner = await make_user(db, "owner")
    await make_user(db, "intruder")
    video = await make_video(db, owner)
    headers = await login(client, "owner")
    intruder = await login(client, "intruder")

    created = await client.post(f"{API}/comments/{video.id}", headers=headers, json={"content": " Great "})
    assert created.status_code == 201
    comment_id = created.json()["data"]["id"]
    assert created.json()["data"]["content"] == "Great"

    assert (await client.post(f"{API}/comments/{video.id}", headers=headers, json={"content": ""})).status_code == 400
    assert (await client.post(f"{API}/comments/999", headers=headers, json={"content": "x"})).status_code == 404

    forbidden = [
        await client.patch(f"{API}/comments/update/{comment_id}", headers=intruder, json={"content": "spam"}),
        await client.delete(f"{API}/comments/delete/{comment_id}", headers=intruder),
    ]
    assert [response.status_code for response in forbidden] == [403, 403]
    comment = await db.get(CommentModel, comment_id)
    assert comment.content == "Great"

    updated = await client.patch(f"{API}/comments/update/{comment_id}", headers=headers, json={"content": "Edited"})
    assert updated.json()["data"]["content"] == "Edited"

    listing = await client.get(f"{API}/comments/video/{video.id}", headers=intruder)
    assert listing.json()["data"]["totalComments"] == 1
    assert listing.json()["data"]["comments"][0]["owner"]["username"] == "owner"

    await client.post(f"{API}/likedislikes/comment/{comment_id}/like-toggle", headers=intruder, json={"type": "like"})
    deleted = await client.delete(f"{API}/comments/delete/{comment_id}", headers=headers)
    assert deleted.status_code == 200
    assert await db.scalar(select(func.count(LikeDislikeModel.id))) == 0


async def test_tweet_lifecycle_and_ownership(client, db):
    author = await make_user(db, "author")
    await make_user(db, "intruder")
    headers = await login(client, "author")
    intruder = await login(client, "intruder")

    created = await client.post(f"{API}/tweets", headers=headers, json={"content": "hello world"})
    assert created.status_code == 201
    tweet_id = created.json()["data"]["id"]

    assert (await client.post(f"{API}/tweets", headers=headers, json={})).status_code == 400
    assert (await client.patch(f"{API}/tweets/{tweet_id}", headers=intruder, json={"content": "x"})).status_code == 403
    assert (await client.delete(f"{API}/tweets/{tweet_id}", headers=intruder)).status_code == 403
    assert (await db.get(TweetModel, tweet_id)).content == "hello world"

    updated = await client.patch(f"{API}/tweets/{tweet_id}", headers=headers, json={"content": "edited"})
    assert updated.json()["data"]["content"] == "edited"

    listing = await client.get(f"{API}/tweets/user/{author.id}", headers=intruder)
    assert listing.json()["data"]["totalTweets"] == 1
    assert (await client.get(f"{API}/tweets/user/999", headers=intruder)).status_code == 404

    assert (await client.delete(f"{API}/tweets/{tweet_id}", headers=headers)).status_code == 200
    assert (await client.delete(f"{API}/tweets/{tweet_id}", headers=headers)).status_code == 404


async def test_subscription_routes(client, db):
    channel = await make_user(db, "channel")
    viewer = await make_user(db, "viewer")
    headers = await login(client, "viewer")

    subscribed = await client.post(f"{API}/subscriptions/c/{channel.id}", headers=headers)
    assert subscribed.status_code == 201
    assert subscribed.json()["data"]["isSubscribed"] is True

    status = await client.get(f"{API}/subscriptions/c/subscription-status/{channel.id}", headers=headers)
    assert status.json()["data"] == {"isSubscribed": True}

    subscribers = await client.get(f"{API}/subscriptions/c/{channel.id}/subscribers", headers=headers)
    assert subscribers.json()["data"]["subscribers"][0]["subscriber"] == viewer.id

    channels = await client.get(f"{API}/subscriptions/subscribed-channels", headers=headers)
    assert channels.json()["data"]["totalSubscribedChannels"] == 1

    searched = await client.get(
        f"{API}/subscriptions/search/subscribed-channels", headers=headers, params={"search": "nomatch"}
    )
    assert searched.json()["data"]["subscribedChannels"] == []

    unsubscribed = await client.post(f"{API}/subscriptions/c/{channel.id}", headers=headers)
    assert unsubscribed.status_code == 200
    assert unsubscribed.json()["data"] == {"isSubscribed": False}

    assert (await client.post(f"{API}/subscriptions/c/999", headers=headers)).status_code == 404
