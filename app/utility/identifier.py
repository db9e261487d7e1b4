from fastapi import HTTPException, status

# primary keys are 32-bit Integer columns
MAX_ID = 2 ** 31 - 1


def parse_id(value: str | None, label: str) -> int:
    """Turn a path/query identifier into a primary key, 400 when it is malformed."""
    if value is None or not str(value).strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label} id is required"
        )

    value = str(value).strip()
    if not (value.isascii() and value.isdigit()) or not 1 <= int(value) <= MAX_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label.lower()} id"
        )

    return int(value)
