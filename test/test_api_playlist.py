from conftest import make_user, make_video, login

API = "/api/v2/playlists"


async def test_playlist_membership_scenario(client, db):
    owner = await make_user(db, "owner")
    first = await make_video(db, owner, title="First")
    second = await make_video(db, owner, title="Second")
    headers = await login(client, "owner")

    created = await client.post(API, headers=headers, json={"name": "Favourites"})
    assert created.status_code == 201
    playlist = created.json()["data"]
    assert playlist["description"] == "Favourites videos"
    assert playlist["videos"] == []

    for video in (first, second):
        added = await client.patch(f"{API}/add/video/{video.id}/{playlist['id']}", headers=headers)
        assert added.status_code == 200

    removed = await client.patch(f"{API}/remove/video/{first.id}/{playlist['id']}", headers=headers)
    assert removed.json()["data"]["videos"] == [second.id]

    duplicate = await client.patch(f"{API}/add/video/{second.id}/{playlist['id']}", headers=headers)
    assert duplicate.status_code == 409

    readded = await client.patch(f"{API}/add/video/{first.id}/{playlist['id']}", headers=headers)
    assert readded.status_code == 200
    assert readded.json()["data"]["videos"] == [second.id, first.id]

    missing = await client.patch(f"{API}/remove/video/999/{playlist['id']}", headers=headers)
    assert missing.status_code == 404

    videos = await client.get(f"{API}/{playlist['id']}/videos", headers=headers)
    assert [video["videoId"] for video in videos.json()["data"]["playlistVideos"]] == [second.id, first.id]

    detail = await client.get(f"{API}/{playlist['id']}", headers=headers)
    assert detail.json()["data"]["totalVideos"] == 2


async def test_playlist_names_are_unique_per_owner(client, db):
    await make_user(db, "owner")
    await make_user(db, "other")
    headers = await login(client, "owner")
    other_headers = await login(client, "other")

    assert (await client.post(API, headers=headers, json={"name": "Mix"})).status_code == 201
    assert (await client.post(API, headers=headers, json={"name": "mix"})).status_code == 409
    assert (await client.post(API, headers=other_headers, json={"name": "Mix"})).status_code == 201
    assert (await client.post(API, headers=headers, json={"name": " "})).status_code == 400


async def test_private_playlist_visibility(client, db):
    owner = await make_user(db, "owner")
    await make_user(db, "stranger")
    headers = await login(client, "owner")
    stranger = await login(client, "stranger")

    created = await client.post(API, headers=headers, json={"name": "Secret", "isPublic": False})
    playlist_id = created.json()["data"]["id"]
    await client.post(API, headers=headers, json={"name": "Open"})

    assert (await client.get(f"{API}/{playlist_id}", headers=headers)).status_code == 200
    assert (await client.get(f"{API}/{playlist_id}", headers=stranger)).status_code == 403
    assert (await client.get(f"{API}/{playlist_id}/videos", headers=stranger)).status_code == 403

    listed = await client.get(f"{API}/user/{owner.id}", headers=stranger)
    assert [item["name"] for item in listed.json()["data"]["playlists"]] == ["Open"]

    mine = await client.get(f"{API}/my-playlists", headers=headers)
    assert mine.json()["data"]["totalPlaylists"] == 2


async def test_only_owner_can_change_playlist(client, db):
    owner = await make_user(db, "owner")
    await make_user(db, "intruder")
    video = await make_video(db, owner)
    headers = await login(client, "owner")
    intruder = await login(client, "intruder")

    playlist_id = (await client.post(API, headers=headers, json={"name": "Mine"})).json()["data"]["id"]

    responses = [
        await client.patch(f"{API}/update/{playlist_id}", headers=intruder, json={"name": "Stolen"}),
        await client.patch(f"{API}/add/video/{video.id}/{playlist_id}", headers=intruder),
        await client.delete(f"{API}/remove/{playlist_id}", headers=intruder),
    ]
    assert [response.status_code for response in responses] == [403, 403, 403]

    detail = await client.get(f"{API}/{playlist_id}", headers=headers)
    assert detail.json()["data"]["name"] == "Mine"
    assert detail.json()["data"]["totalVideos"] == 0


async def test_update_and_delete_playlist(client, db):
    await make_user(db, "owner")
    headers = await login(client, "owner")
    playlist_id = (await client.post(API, headers=headers, json={"name": "Draft"})).json()["data"]["id"]

    updated = await client.patch(
        f"{API}/update/{playlist_id}", headers=headers, json={"name": "Final", "description": "Done"}
    )
    assert updated.json()["data"]["name"] == "Final"
    assert updated.json()["data"]["description"] == "Done"

    deleted = await client.delete(f"{API}/remove/{playlist_id}", headers=headers)
    assert deleted.status_code == 200
    assert (await client.get(f"{API}/{playlist_id}", headers=headers)).status_code == 404
