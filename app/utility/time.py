from datetime import datetime, UTC


def utc_now() -> datetime:
    # columns are "timestamp without time zone", stored as naive UTC
    return datetime.now(UTC).replace(tzinfo=None)
