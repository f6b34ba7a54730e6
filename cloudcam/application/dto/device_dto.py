from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class DeviceRecord(BaseModel):
    """Raw device record as returned by the device cloud"""
    model_config = ConfigDict(extra="allow")

    id: str = Field(min_length=1)
    name: Optional[str] = None
    category: Optional[str] = None
    online: bool = False
    product_id: Optional[str] = None
    product_name: Optional[str] = None
    uuid: Optional[str] = None
    update_time: Optional[int] = None
    create_time: Optional[int] = None
    active_time: Optional[int] = None
    icon: Optional[str] = None
    ip: Optional[str] = None
    time_zone: Optional[str] = None
    sub: Optional[bool] = None


class DeviceListResponse(BaseModel):
    """DTO for the raw device list (debug endpoint)"""
    devices: List[DeviceRecord]
