"""Timestamp helpers for the SP-API wire format."""

from datetime import datetime, timezone
from typing import Optional


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_iso8601(dt: datetime) -> str:
    """
    Format as UTC with millisecond precision and a Z suffix,
    e.g. 2025-01-01T00:00:00.000Z. Naive datetimes are taken as UTC.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    dt = dt.astimezone(timezone.utc)
    return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{dt.microsecond // 1000:03d}Z"


def parse_iso8601(value: Optional[str]) -> datetime:
    """
    Parse an ISO-8601 date or datetime into an aware UTC datetime.

    Raises:
        ValueError: If the value is empty or not ISO-8601
    """
    if not value or not value.strip():
        raise ValueError("timestamp is empty")
    dt = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)
