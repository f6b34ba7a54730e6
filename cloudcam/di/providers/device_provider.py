from typing import TYPE_CHECKING

from ...application.use_cases.device.list_devices import ListDevicesUseCase
from ...infrastructure.external.device_discovery import DeviceDiscovery

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceProvider:
    """Device use case provider - registers all device-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all device use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            ListDevicesUseCase,
            lambda: ListDevicesUseCase(
                device_discovery=container.get(DeviceDiscovery),
            )
        )
