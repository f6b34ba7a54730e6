from .camera_dto import (
    CameraListResponse,
    CameraResponse,
    CommandRequest,
    DeviceStatusResponse,
    PtzRequest,
    RecordingDatesResponse,
    RecordingEventsResponse,
    StreamUrlResponse,
    SuccessResponse,
)
from .device_dto import DeviceListResponse, DeviceRecord
from .health_dto import ErrorResponse, HealthResponse

__all__ = [
    "CameraListResponse",
    "CameraResponse",
    "CommandRequest",
    "DeviceStatusResponse",
    "PtzRequest",
    "RecordingDatesResponse",
    "RecordingEventsResponse",
    "StreamUrlResponse",
    "SuccessResponse",
    "DeviceListResponse",
    "DeviceRecord",
    "ErrorResponse",
    "HealthResponse",
]
