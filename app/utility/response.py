from typing import Any

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


class ApiResponse(JSONResponse):
    """Uniform success envelope: {statusCode, data, message, success}."""

    def __init__(self, status_code: int, data: Any = None, message: str = "Success"):
        super().__init__(
            status_code=status_code,
            content=jsonable_encoder({
                "statusCode": status_code,
                "data": data if data is not None else {},
                "message": message,
                "success": status_code < 400,
            })
        )


def error_body(status_code: int, message: str, errors: list | None = None) -> dict:
    return {
        "statusCode": status_code,
        "message": message,
        "success": False,
        "errors": errors or [],
    }
