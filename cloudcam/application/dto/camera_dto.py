from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ...domain.constants import CameraFields


class CameraResponse(BaseModel):
    """DTO for camera response"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    device_id: str = Field(alias=CameraFields.DEVICE_ID)
    is_online: bool = Field(alias=CameraFields.IS_ONLINE)
    supports_ptz: bool = Field(alias=CameraFields.SUPPORTS_PTZ)
    category: str
    last_seen: str = Field(alias=CameraFields.LAST_SEEN)
    stream_url: Optional[str] = Field(default=None, alias=CameraFields.STREAM_URL)


class CameraListResponse(BaseModel):
    """DTO for camera list response"""
    cameras: List[CameraResponse]


class StreamUrlResponse(BaseModel):
    """DTO for an allocated stream URL"""
    model_config = ConfigDict(populate_by_name=True)

    stream_url: str = Field(alias=CameraFields.STREAM_URL)


class DeviceStatusResponse(BaseModel):
    """DTO wrapping the raw device status payload"""
    status: Any = None


class PtzRequest(BaseModel):
    """DTO for PTZ move request. Direction is checked by the use case."""
    direction: Optional[str] = None


class CommandRequest(BaseModel):
    """DTO for generic device command request"""
    code: Optional[str] = None
    value: Any = None


class SuccessResponse(BaseModel):
    """DTO for command acknowledgements"""
    success: bool = True


class RecordingDatesResponse(BaseModel):
    """DTO for dates with cloud recordings"""
    dates: List[str]


class RecordingEventsResponse(BaseModel):
    """DTO for recorded events in a time range"""
    events: List[Any]
