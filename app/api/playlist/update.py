from fastapi import HTTPException, status, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.playlist.create import PlaylistRequest, name_taken
from app.api.router_base import router_playlist as router
from app.db.dependency import get_db
from app.model.playlist import PlaylistModel
from app.model.user import UserModel
from app.service.aggregate.playlist import playlist_video_ids
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse
from app.utility.serializer import playlist_dict


@router.patch("/update/{playlist_id}")
async def update_playlist(
        playlist_id: str,
        data: PlaylistRequest,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await load_owned(
        db, PlaylistModel, parse_id(playlist_id, "Playlist"), user,
        not_found="Playlist not found",
        forbidden="Unauthorized to update playlist"
    )

    name = (data.name or "").strip()
    description = (data.description or "").strip()

    if name and await name_taken(db, user.id, name, exclude_id=playlist.id):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Playlist with this name already exists"
        )

    if name:
        playlist.name = name
    if description:
        playlist.description = description
    if data.is_public is not None:
        playlist.is_public = data.is_public

    await db.commit()
    await db.refresh(playlist)

    return ApiResponse(
        status.HTTP_200_OK,
        playlist_dict(playlist, await playlist_video_ids(db, playlist.id)),
        "Playlist updated successfully"
    )
