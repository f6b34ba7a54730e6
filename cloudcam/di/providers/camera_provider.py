from typing import TYPE_CHECKING

from ...application.use_cases.camera.list_cameras import ListCamerasUseCase
from ...application.use_cases.camera.get_camera_stream import GetCameraStreamUseCase
from ...application.use_cases.camera.get_camera_status import GetCameraStatusUseCase
from ...application.use_cases.camera.control_ptz import ControlPtzUseCase
from ...application.use_cases.camera.send_command import SendCommandUseCase
from ...application.use_cases.camera.list_recordings import (
    ListRecordingDatesUseCase,
    ListRecordingEventsUseCase,
)
from ...infrastructure.external.device_client import DeviceClient
from ...infrastructure.external.device_discovery import DeviceDiscovery
from ...infrastructure.external.stream_resolver import StreamResolver
from ...infrastructure.external.command_dispatcher import CommandDispatcher

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CameraProvider:
    """Camera use case provider - registers all camera-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all camera use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            ListCamerasUseCase,
            lambda: ListCamerasUseCase(
                device_discovery=container.get(DeviceDiscovery),
                stream_resolver=container.get(StreamResolver),
            )
        )

        container.register_factory(
            GetCameraStreamUseCase,
            lambda: GetCameraStreamUseCase(
                stream_resolver=container.get(StreamResolver),
            )
        )

        container.register_factory(
            GetCameraStatusUseCase,
            lambda: GetCameraStatusUseCase(
                device_client=container.get(DeviceClient),
            )
        )

        container.register_factory(
            ControlPtzUseCase,
            lambda: ControlPtzUseCase(
                command_dispatcher=container.get(CommandDispatcher),
            )
        )

        container.register_factory(
            SendCommandUseCase,
            lambda: SendCommandUseCase(
                command_dispatcher=container.get(CommandDispatcher),
            )
        )

        # Recordings
        container.register_factory(
            ListRecordingDatesUseCase,
            lambda: ListRecordingDatesUseCase(
                device_client=container.get(DeviceClient),
            )
        )

        container.register_factory(
            ListRecordingEventsUseCase,
            lambda: ListRecordingEventsUseCase(
                device_client=container.get(DeviceClient),
            )
        )
