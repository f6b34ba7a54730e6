# Standard library imports
from typing import Any

# Local application imports
from ....infrastructure.external.device_client import DeviceClient


class GetCameraStatusUseCase:
    """Use case for reading a camera's raw status data points"""

    def __init__(self, device_client: DeviceClient) -> None:
        self.device_client = device_client

    async def execute(self, device_id: str) -> Any:
        return await self.device_client.get_status(device_id)
