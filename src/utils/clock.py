"""Time helpers shared by pricing and freshness calculations"""

from datetime import datetime, UTC
from typing import Optional


def utc_now() -> datetime:
    """Current time as an aware UTC datetime"""
    return datetime.now(UTC)


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC so they compare with aware ones"""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def to_iso8601(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_utc(value).isoformat()
