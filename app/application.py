from fastapi import FastAPI
from app.lifespan import lifespan
from app.middleware.cors import add_cors
from app.middleware.errors import add_exception_handlers
from app.api.router import add_router

application = FastAPI(
    title="VideoHub FastAPI Service",
    description="Video sharing platform backend API documentation",
    version="2.0.0",
    lifespan=lifespan
)

add_cors(application)
add_exception_handlers(application)
add_router(application)
