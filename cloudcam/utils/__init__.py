"""Utility modules for the camera cloud backend."""

from .datetime_utils import now_iso, now_ms, to_iso, unix_to_iso, utc_now

__all__ = [
    "now_iso",
    "now_ms",
    "to_iso",
    "unix_to_iso",
    "utc_now",
]
