# Standard library imports
from typing import Any, List, Optional

# Local application imports
from ....core.exceptions import ValidationError
from ....infrastructure.external.device_client import DeviceClient


def parse_epoch_seconds(raw: Optional[str], field: str) -> int:
    """
    Parse a required epoch-seconds query parameter

    Raises:
        ValidationError: If missing or not an integer
    """
    if raw is None or not str(raw).strip():
        raise ValidationError("startTime and endTime are required", field=field)
    try:
        return int(str(raw).strip())
    except ValueError:
        raise ValidationError(f"{field} must be an integer timestamp", field=field)


class ListRecordingDatesUseCase:
    """Use case for listing dates that have cloud recordings"""

    def __init__(self, device_client: DeviceClient) -> None:
        self.device_client = device_client

    async def execute(self, device_id: str) -> List[str]:
        return await self.device_client.get_record_dates(device_id)


class ListRecordingEventsUseCase:
    """Use case for listing recorded events in a time range"""

    def __init__(self, device_client: DeviceClient) -> None:
        self.device_client = device_client

    async def execute(
        self,
        device_id: str,
        start_time: Optional[str],
        end_time: Optional[str],
    ) -> List[Any]:
        """
        List recorded events between two epoch-second timestamps

        Args:
            device_id: Cloud device id of the camera
            start_time: Raw startTime query value
            end_time: Raw endTime query value

        Returns:
            Recorded events; empty when nothing was recorded

        Raises:
            ValidationError: If either bound is missing or malformed, or the
                range is reversed (no call is made)
        """
        start = parse_epoch_seconds(start_time, "startTime")
        end = parse_epoch_seconds(end_time, "endTime")
        if end < start:
            raise ValidationError("endTime must not be before startTime", field="endTime")
        return await self.device_client.get_record_events(device_id, start, end)
