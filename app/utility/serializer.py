"""
Response shapes shared by several routes.

Keys are camelCase because that is what the web client reads.
"""


def user_card(user) -> dict:
    return {
        "id": user.id,
        "username": user.username,
        "fullName": user.full_name,
        "avatar": user.avatar,
    }


def user_profile(user) -> dict:
    # never exposes the password hash
    return {
        **user_card(user),
        "email": user.email,
        "coverImage": user.cover_image,
        "createdAt": user.created_at,
        "updatedAt": user.updated_at,
    }


def video_dict(video) -> dict:
    return {
        "id": video.id,
        "title": video.title,
        "description": video.description,
        "videoFile": video.video_file,
        "thumbnail": video.thumbnail,
        "duration": video.duration,
        "views": video.views,
        "isPublished": video.is_published,
        "owner": video.owner_id,
        "createdAt": video.created_at,
        "updatedAt": video.updated_at,
    }


def comment_dict(comment) -> dict:
    return {
        "id": comment.id,
        "content": comment.content,
        "video": comment.video_id,
        "owner": comment.owner_id,
        "createdAt": comment.created_at,
        "updatedAt": comment.updated_at,
    }


def tweet_dict(tweet) -> dict:
    return {
        "id": tweet.id,
        "content": tweet.content,
        "owner": tweet.owner_id,
        "createdAt": tweet.created_at,
        "updatedAt": tweet.updated_at,
    }


def playlist_dict(playlist, video_ids: list[int]) -> dict:
    return {
        "id": playlist.id,
        "name": playlist.name,
        "description": playlist.description,
        "isPublic": playlist.is_public,
        "owner": playlist.owner_id,
        "videos": video_ids,
        "createdAt": playlist.created_at,
        "updatedAt": playlist.updated_at,
    }
