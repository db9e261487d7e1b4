from datetime import timedelta

from sqlalchemy import delete
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.environments import SESSION_EXPIRE_TIME
from app.model.session import SessionModel
from app.utility.security import new_session_token, digest_token
from app.utility.time import utc_now


async def open_session(db: AsyncSession, user_id: int) -> str:
    """
    Replace every session of the user with a fresh one.

    Returns:
        the plain session token, which is handed to the client and never stored
    """
    await db.execute(delete(SessionModel).where(SessionModel.user_id == user_id))

    session_token = new_session_token()
    db.add(SessionModel(
        user_id=user_id,
        token_digest=digest_token(session_token),
        expires_at=utc_now() + timedelta(seconds=SESSION_EXPIRE_TIME)
    ))
    await db.commit()

    return session_token
