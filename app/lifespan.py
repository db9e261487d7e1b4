import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.config.environments import DB_AUTO_CREATE
from app.db.database import Base, engine
from app.model import registry
from app.service.sessionCleaner import start_cleanup_task, stop_cleanup_task

logger = logging.getLogger("uvicorn")


@asynccontextmanager
async def lifespan(application: FastAPI):
    logger.info("App starting up...")

    if DB_AUTO_CREATE:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info(f"Ensured {len(registry.ALL_MODELS)} tables exist")

    cleanup_task = start_cleanup_task()
    yield

    await stop_cleanup_task(cleanup_task)
    await engine.dispose()
    logger.info("App shutting down...")
