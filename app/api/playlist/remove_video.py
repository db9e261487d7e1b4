from fastapi import HTTPException, status, Depends
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_playlist as router
from app.db.dependency import get_db
from app.model.playlist import PlaylistModel, PlaylistVideoModel
from app.model.user import UserModel
from app.service.aggregate.playlist import playlist_video_ids
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.serializer import playlist_dict


@router.patch("/remove/video/{video_id}/{playlist_id}")
async def remove_video(
        video_id: str,
        playlist_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    video_pk = parse_id(video_id, "Video")
    playlist = await load_owned(
        db, PlaylistModel, parse_id(playlist_id, "Playlist"), user,
        not_found="Playlist not found",
        forbidden="You do not have permission to remove videos from this playlist"
    )

    removed = await db.execute(
        delete(PlaylistVideoModel)
        .where(
            PlaylistVideoModel.playlist_id == playlist.id,
            PlaylistVideoModel.video_id == video_pk,
        )
        .returning(PlaylistVideoModel.id)
        .execution_options(synchronize_session=False)
    )
    if removed.first() is None:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Video not found in playlist"
        )

    await db.commit()
    await db.refresh(playlist)

    return ApiResponse(
        status.HTTP_200_OK,
        playlist_dict(playlist, await playlist_video_ids(db, playlist.id)),
        "Video removed from playlist successfully"
    )
