from typing import Optional

from fastapi import Request, Response, HTTPException, status, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.config.environments import SESSION_EXPIRE_TIME, COOKIE_SECURE, COOKIE_SAMESITE
from app.db.dependency import get_db
from app.model.session import SessionModel
from app.model.user import UserModel
from app.utility.security import digest_token
from app.utility.time import utc_now

SESSION_COOKIE = "session_token"


def read_session_token(request: Request) -> Optional[str]:
    """The cookie wins over an `Authorization: Bearer` header."""
    session_token = request.cookies.get(SESSION_COOKIE)
    if session_token:
        return session_token

    authorization = request.headers.get("Authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()

    return None


async def _find_session(db: AsyncSession, session_token: str) -> Optional[SessionModel]:
    result = await db.execute(
        select(SessionModel).where(SessionModel.token_digest == digest_token(session_token))
    )
    session = result.scalar_one_or_none()

    if not session or (session.expires_at and session.expires_at < utc_now()):
        return None
    return session


async def get_current_session(request: Request, db: AsyncSession = Depends(get_db)) -> SessionModel:
    session_token = read_session_token(request)
    if not session_token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Login required"
        )

    session = await _find_session(db, session_token)
    if not session:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired or invalid"
        )

    return session


async def get_current_user(
        session: SessionModel = Depends(get_current_session),
        db: AsyncSession = Depends(get_db)
) -> UserModel:
    user = await db.get(UserModel, session.user_id)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Session expired or invalid"
        )

    return user



def set_session_cookie(response: Response, session_token: str):
    response.set_cookie(
        key=SESSION_COOKIE,
        value=session_token,
        httponly=True,
        max_age=SESSION_EXPIRE_TIME,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE
    )


def clear_session_cookie(response: Response):
    response.delete_cookie(
        key=SESSION_COOKIE,
        httponly=True,
        secure=COOKIE_SECURE,
        samesite=COOKIE_SAMESITE
    )


async def load_owned(db: AsyncSession, model, entity_id: int, user: UserModel, not_found: str, forbidden: str):
    """Fetch an entity the caller is about to change, 404 if missing and 403 if someone else owns it."""
    entity = await db.get(model, entity_id)
    if not entity:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=not_found
        )

    if entity.owner_id != user.id:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=forbidden
        )

    return entity
