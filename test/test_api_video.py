from sqlalchemy import select, func

from app.model.like_dislike import TargetKind
from app.model.video import VideoModel
from app.service.interaction import toggle_like_dislike
from conftest import make_user, make_video, login

API = "/api/v2/videos"


def publish_form(title="My first video", description="Something to watch"):
    data = {"title": title, "description": description}
    files = {
        "videoFile": ("clip.mp4", b"mp4-bytes", "video/mp4"),
        "thumbnail": ("thumb.png", b"png-bytes", "image/png"),
    }
    return data, files


async def test_publish_video(client, media, db):
    owner = await make_user(db, "owner")
    headers = await login(client, "owner")
    data, files = publish_form()

    response = await client.post(API, headers=headers, data=data, files=files)

    assert response.status_code == 201, response.text
    video = response.json()["data"]
    assert video["owner"] == owner.id
    assert video["duration"] == 12.5
    assert video["views"] == 0
    assert video["isPublished"] is True
    assert video["videoFile"].startswith(f"https://media.test/video/videohub/{owner.id}/")
    assert len(media.uploads) == 2


async def test_publish_requires_files_and_text(client, media, db):
    await make_user(db, "owner")
    headers = await login(client, "owner")

    data, files = publish_form(description="")
    assert (await client.post(API, headers=headers, data=data, files=files)).status_code == 400

    data, files = publish_form()
    del files["thumbnail"]
    response = await client.post(API, headers=headers, data=data, files=files)
    assert response.status_code == 400
    assert response.json()["message"] == "Thumbnail file is required"

    media.fail_uploads = True
    data, files = publish_form()
    assert (await client.post(API, headers=headers, data=data, files=files)).status_code == 500

    assert await db.scalar(select(func.count(VideoModel.id))) == 0


async def test_browse_and_detail(client, db):
    owner = await make_user(db, "owner")
    await make_user(db, "viewer")
    shown = await make_video(db, owner, title="Shown")
    await make_video(db, owner, title="Hidden", is_published=False)
    headers = await login(client, "viewer")

    listing = await client.get(API, headers=headers, params={"userId": str(owner.id)})
    assert listing.status_code == 200
    data = listing.json()["data"]
    assert [video["id"] for video in data["videos"]] == [shown.id]
    assert data["currentPage"] == 1

    detail = await client.get(f"{API}/{shown.id}", headers=headers)
    assert detail.status_code == 200
    assert detail.json()["data"]["ownerUsername"] == "owner"

    assert (await client.get(f"{API}/abc", headers=headers)).status_code == 400
    assert (await client.get(f"{API}/999", headers=headers)).status_code == 404


async def test_browse_rejects_oversized_limit(client, db):
    await make_user(db, "viewer")
    headers = await login(client, "viewer")

    response = await client.get(API, headers=headers, params={"limit": 1000})

    assert response.status_code == 400
    assert response.json()["success"] is False


async def test_counts_owner_and_channel_videos(client, db):
    owner = await make_user(db, "owner")
    fan = await make_user(db, "fan")
    video = await make_video(db, owner)
    await toggle_like_dislike(db, fan.id, TargetKind.VIDEO, video.id, "like")
    headers = await login(client, "fan")

    counts = await client.get(f"{API}/{video.id}/like-dislike-counts", headers=headers)
    assert counts.json()["data"] == {"totalLikes": 1, "totalDislikes": 0}

    owner_details = await client.get(f"{API}/owner/{owner.id}", headers=headers)
    assert owner_details.json()["data"]["totalSubscribers"] == 0

    channel = await client.get(f"{API}/channel/{owner.id}/videos", headers=headers)
    assert channel.json()["data"]["totalVideos"] == 1


async def test_only_owner_can_change_video(client, media, db):
    owner = await make_user(db, "owner")
    await make_user(db, "intruder")
    video = await make_video(db, owner, title="Original")
    headers = await login(client, "intruder")

    update = await client.patch(f"{API}/{video.id}/update", headers=headers, data={"title": "Hacked"})
    toggle = await client.patch(f"{API}/{video.id}/toggle-publish", headers=headers)
    delete = await client.delete(f"{API}/{video.id}/delete", headers=headers)

    assert [update.status_code, toggle.status_code, delete.status_code] == [403, 403, 403]
    await db.refresh(video)
    assert video.title == "Original"
    assert video.is_published is True
    assert media.deleted == []


async def test_update_video_with_new_thumbnail(client, media, db):
    owner = await make_user(db, "owner")
    video = await make_video(db, owner, title="Original")
    old_thumbnail = video.thumbnail
    headers = await login(client, "owner")

    response = await client.patch(
        f"{API}/{video.id}/update",
        headers=headers,
        data={"title": "Renamed"},
        files={"thumbnail": ("new.png", b"png", "image/png")},
    )

    assert response.status_code == 200
    body = response.json()["data"]
    assert body["title"] == "Renamed"
    assert body["description"] == video.description
    assert body["thumbnail"] != old_thumbnail
    assert media.deleted == [old_thumbnail]


async def test_toggle_publish_flips(client, db):
    owner = await make_user(db, "owner")
    video = await make_video(db, owner)
    headers = await login(client, "owner")

    first = await client.patch(f"{API}/{video.id}/toggle-publish", headers=headers)
    second = await client.patch(f"{API}/{video.id}/toggle-publish", headers=headers)

    assert first.json()["data"]["isPublished"] is False
    assert second.json()["data"]["isPublished"] is True


async def test_delete_video_removes_row_and_assets(client, media, db):
    owner = await make_user(db, "owner")
    video = await make_video(db, owner)
    headers = await login(client, "owner")

    response = await client.delete(f"{API}/{video.id}/delete", headers=headers)

    assert response.status_code == 200
    assert await db.scalar(select(func.count(VideoModel.id))) == 0
    assert set(media.deleted) == {video.thumbnail, video.video_file}
    assert media.deleted_folders == [video.asset_folder]


async def test_view_counts_once_per_user(client, db):
    owner = await make_user(db, "owner")
    await make_user(db, "viewer")
    video = await make_video(db, owner)
    headers = await login(client, "viewer")

    first = await client.post(f"{API}/{video.id}/view", headers=headers)
    second = await client.post(f"{API}/{video.id}/view", headers=headers)

    assert first.json()["data"]["views"] == 1
    assert first.json()["message"] == "View count incremented successfully"
    assert second.json()["data"]["views"] == 1
    assert second.json()["message"] == "User has already viewed this video"


async def test_recommendations_route(client, db):
    owner = await make_user(db, "owner")
    source = await make_video(db, owner, title="Source")
    other = await make_video(db, owner, title="Other")
    hidden = await make_video(db, owner, title="Hidden", is_published=False)
    headers = await login(client, "owner")

    response = await client.get(f"{API}/{source.id}/recommendations", headers=headers)
    assert response.status_code == 200
    assert [video["videoId"] for video in response.json()["data"]["videos"]] == [other.id]

    blocked = await client.get(f"{API}/{hidden.id}/recommendations", headers=headers)
    assert blocked.status_code == 403
