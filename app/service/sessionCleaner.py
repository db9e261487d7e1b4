import asyncio
import logging
from sqlalchemy import delete
from app.db.database import AsyncSessionLocal
from app.model.session import SessionModel
from app.config.environments import SESSION_EXPIRE_TIME
from app.utility.time import utc_now

logger = logging.getLogger("uvicorn")

SESSION_CLEANER_INTERVAL = SESSION_EXPIRE_TIME


async def cleanup_expired_sessions(session_factory=AsyncSessionLocal) -> int:
    async with session_factory() as db:
        result = await db.execute(
            delete(SessionModel).where(
                SessionModel.expires_at.is_not(None),
                SessionModel.expires_at < utc_now()
            )
        )
        await db.commit()
        return result.rowcount


async def session_cleanup_worker():
    while True:
        try:
            deleted = await cleanup_expired_sessions()
            if deleted > 0:
                logger.info(f"[SessionCleaner] Deleted {deleted} expired sessions")
        except Exception:
            logger.exception("[SessionCleaner] Cleanup failed")

        await asyncio.sleep(SESSION_CLEANER_INTERVAL)


def start_cleanup_task() -> asyncio.Task:
    task = asyncio.create_task(session_cleanup_worker())
    logger.info("[SessionCleaner] Background cleanup task started.")
    return task


async def stop_cleanup_task(task: asyncio.Task):
    task.cancel()
    try:
        await task
    except asyncio.CancelledError:
        pass
    logger.info("[SessionCleaner] Background cleanup task stopped.")
