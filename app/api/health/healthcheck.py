from fastapi import APIRouter, status, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.router_base import API_PREFIX
from app.db.dependency import get_db
from app.utility.response import ApiResponse

router = APIRouter(
    prefix=f"{API_PREFIX}/health",
    tags=["Health"]
)


@router.get(
    "/alive",
    summary="Health Check",
    description="Return whether the server is up and the database answers",
    responses={
        200: {
            "description": "When server and database are alive",
            "content": {
                "application/json": {
                    "example": {
                        "statusCode": 200,
                        "data": {"server": "ok", "database": "ok"},
                        "message": "Server is alive",
                        "success": True
                    }
                }
            }
        }
    }
)
async def healthcheck(db: AsyncSession = Depends(get_db)):
    await db.execute(text("SELECT 1"))
    return ApiResponse(status.HTTP_200_OK, {"server": "ok", "database": "ok"}, "Server is alive")
