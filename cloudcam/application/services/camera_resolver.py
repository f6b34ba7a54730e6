"""
Maps raw device records to Camera entities.

Pure functions, no I/O: the same records always produce the same cameras,
in the same order.
"""
from typing import Iterable, List

from ..dto.device_dto import DeviceRecord
from ...domain.constants.cloud_constants import (
    CAMERA_CATEGORIES,
    DEFAULT_CAMERA_NAME,
    PTZ_CATEGORIES,
)
from ...domain.models.camera import Camera
from ...utils.datetime_utils import unix_to_iso


def is_camera(record: DeviceRecord) -> bool:
    """True if the record's category is one of the camera-like tags."""
    return record.category in CAMERA_CATEGORIES


def display_name(record: DeviceRecord) -> str:
    """First non-empty of device name, product name, then the placeholder."""
    for candidate in (record.name, record.product_name):
        if candidate and candidate.strip():
            return candidate
    return DEFAULT_CAMERA_NAME


def to_camera(record: DeviceRecord) -> Camera:
    """Map one camera record to the domain entity."""
    return Camera(
        id=record.id,
        name=display_name(record),
        device_id=record.uuid or record.id,
        is_online=record.online,
        supports_ptz=record.category in PTZ_CATEGORIES,
        category=record.category or "",
        last_seen_iso=unix_to_iso(record.update_time),
    )


def resolve_cameras(records: Iterable[DeviceRecord]) -> List[Camera]:
    """Keep camera records and map them, preserving input order."""
    return [to_camera(record) for record in records if is_camera(record)]
