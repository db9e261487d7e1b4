from fastapi import HTTPException, status, Depends
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_playlist as router
from app.db.database import insert_for
from app.db.dependency import get_db
from app.model.playlist import PlaylistModel, PlaylistVideoModel
from app.model.user import UserModel
from app.model.video import VideoModel
from app.service.aggregate.playlist import playlist_video_ids
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.serializer import playlist_dict


@router.patch("/add/video/{video_id}/{playlist_id}")
async def add_video(
        video_id: str,
        playlist_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video_pk = parse_id(video_id, "Video")
    playlist = await load_owned(
        db, PlaylistModel, parse_id(playlist_id, "Playlist"), user,
        not_found="Playlist not found",
        forbidden="Unauthorized to add video to playlist"
    )

    if not await db.get(VideoModel, video_pk):
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found"
        )

    last_position = await db.scalar(
        select(func.max(PlaylistVideoModel.position))
        .where(PlaylistVideoModel.playlist_id == playlist.id)
    )

    inserted = await db.execute(
        insert_for(db, PlaylistVideoModel)
        .values(
            playlist_id=playlist.id,
            video_id=video_pk,
            position=(last_position or 0) + 1,
        )
        .on_conflict_do_nothing(index_elements=["playlist_id", "video_id"])
        .returning(PlaylistVideoModel.id)
    )
    if inserted.first() is None:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Video already exists in playlist"
        )

    await db.commit()
    await db.refresh(playlist)

    return ApiResponse(
        status.HTTP_200_OK,
        playlist_dict(playlist, await playlist_video_ids(db, playlist.id)),
        "Video added to playlist successfully"
    )
