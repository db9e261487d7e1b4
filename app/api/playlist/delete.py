import logging

from fastapi import status, Depends
from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.dependency import get_current_user, load_owned
from app.api.router_base import router_playlist as router
from app.db.dependency import get_db
from app.model.playlist import PlaylistModel, PlaylistVideoModel
from app.model.user import UserModel
from app.utility.identifier import parse_id
from app.utility.response import ApiResponse

logger = logging.getLogger("uvicorn")


@router.delete("/remove/{playlist_id}")
async def delete_playlist(
        playlist_id: str,
        user: UserModel = Depends(get_current_user),
        db: AsyncSession = Depends(get_db)
):
    playlist = await load_owned(
        db, PlaylistModel, parse_id(playlist_id, "Playlist"), user,
        not_found="Playlist not found",
        forbidden="Unauthorized to delete playlist"
    )

    await db.execute(
        delete(PlaylistVideoModel)
        .where(PlaylistVideoModel.playlist_id == playlist.id)
        .execution_options(synchronize_session=False)
    )
    await db.delete(playlist)
    await db.commit()

    logger.info(f"playlist {playlist.id} deleted by user {user.id}")
    return ApiResponse(status.HTTP_200_OK, {}, "Playlist deleted successfully")
