# Standard library imports
import logging
from typing import Any, List, Optional

# External package imports
from pydantic import ValidationError as PydanticValidationError

# Local application imports
from .base_cloud_client import BaseCloudClient, cloud_path
from ...application.dto.device_dto import DeviceRecord
from ...core.exceptions import MalformedPayloadError
from ...domain.constants.cloud_constants import (
    DEVICE_PATH,
    DEVICE_STATUS_PATH,
    RECORD_DATES_PATH,
    RECORD_EVENTS_PATH,
)

logger = logging.getLogger(__name__)


def parse_device_record(raw: Any, path: str) -> DeviceRecord:
    """
    Validate one raw device record.

    Raises:
        MalformedPayloadError: If the record is not an object or lacks an id
    """
    try:
        return DeviceRecord.model_validate(raw)
    except PydanticValidationError as e:
        raise MalformedPayloadError(
            f"Malformed device record from {path}: {e.error_count()} validation error(s)",
            path=path,
        ) from e


class DeviceClient(BaseCloudClient):
    """
    Client for single-device lookups on the device cloud.

    Covers the device record itself, its live status data points and
    its cloud recordings.
    """

    async def get_device(self, device_id: str) -> Optional[DeviceRecord]:
        """
        Fetch one device record by id.

        Args:
            device_id: Cloud device id

        Returns:
            DeviceRecord, or None if the cloud returned an empty result
        """
        path = cloud_path(DEVICE_PATH, device_id=device_id)
        result = await self.gateway.get_result(path)
        if not result:
            return None
        return parse_device_record(result, path)

    async def get_status(self, device_id: str) -> Any:
        """
        Fetch the raw status payload (list of data point code/value pairs).

        Args:
            device_id: Cloud device id

        Returns:
            The `result` payload exactly as the cloud sent it
        """
        return await self.gateway.get_result(cloud_path(DEVICE_STATUS_PATH, device_id=device_id))

    async def get_record_dates(self, device_id: str) -> List[str]:
        """
        List the dates on which the camera has cloud recordings.

        Args:
            device_id: Cloud device id

        Returns:
            List of date strings; empty when nothing is recorded
        """
        path = cloud_path(RECORD_DATES_PATH, device_id=device_id)
        result = await self.gateway.get_result(path)
        if not result:
            return []
        if not isinstance(result, list):
            raise MalformedPayloadError(f"Expected a list of dates from {path}", path=path)
        return [str(date) for date in result]

    async def get_record_events(
        self,
        device_id: str,
        start_time: int,
        end_time: int,
    ) -> List[Any]:
        """
        List recorded events in a time range.

        Args:
            device_id: Cloud device id
            start_time: Range start, epoch seconds
            end_time: Range end, epoch seconds

        Returns:
            List of event entries; empty when nothing is recorded
        """
        path = cloud_path(
            RECORD_EVENTS_PATH,
            device_id=device_id,
            start_time=start_time,
            end_time=end_time,
        )
        result = await self.gateway.get_result(path)
        if not result:
            return []
        if not isinstance(result, dict):
            raise MalformedPayloadError(f"Expected an object from {path}", path=path)
        events = result.get("datas") or []
        logger.debug(f"Found {len(events)} recorded events for device {device_id}")
        return list(events)
