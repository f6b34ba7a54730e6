"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the client layer.
The device cloud speaks epoch seconds/milliseconds; the presentation layer
expects ISO 8601 strings in UTC.

Functions:
- utc_now(): Returns timezone-aware UTC datetime
- now_ms(): Current epoch time in milliseconds (used for signing and token expiry)
- now_iso(): Current time as ISO 8601 string
- unix_to_iso(): Convert epoch seconds to ISO 8601 string
"""
import time
from datetime import datetime, timezone as dt_timezone
from typing import Optional


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.
    """
    return datetime.now(dt_timezone.utc)


def now_ms() -> int:
    """
    Get current epoch time in whole milliseconds.

    Returns:
        Milliseconds since the epoch, as sent in the `t` signing header
    """
    return int(time.time() * 1000)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string with millisecond precision.
    Naive datetimes are assumed to be UTC.

    Returns:
        ISO 8601 string such as "2025-12-24T10:30:00.000Z", or None if dt is None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)
    dt = dt.astimezone(dt_timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_iso() -> str:
    """
    Get current UTC time as ISO 8601 string.
    """
    return to_iso(utc_now())


def unix_to_iso(seconds: Optional[float]) -> str:
    """
    Convert epoch seconds (as returned in device records) to ISO 8601.

    Args:
        seconds: Epoch seconds; None or missing is treated as 0

    Returns:
        ISO 8601 UTC string
    """
    return to_iso(datetime.fromtimestamp(seconds or 0, tz=dt_timezone.utc))
