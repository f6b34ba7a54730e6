# Standard library imports
from typing import List

# Local application imports
from ....infrastructure.external.device_discovery import DeviceDiscovery
from ...dto.device_dto import DeviceRecord


class ListDevicesUseCase:
    """Use case for listing every raw device record (cameras or not)"""

    def __init__(self, device_discovery: DeviceDiscovery) -> None:
        self.device_discovery = device_discovery

    async def execute(self) -> List[DeviceRecord]:
        """
        List all devices visible to the project

        Returns:
            Raw device records as discovered
        """
        return await self.device_discovery.list_devices()
