from .list_cameras import ListCamerasUseCase
from .get_camera_stream import GetCameraStreamUseCase
from .get_camera_status import GetCameraStatusUseCase
from .control_ptz import ControlPtzUseCase
from .send_command import SendCommandUseCase
from .list_recordings import ListRecordingDatesUseCase, ListRecordingEventsUseCase

__all__ = [
    "ListCamerasUseCase",
    "GetCameraStreamUseCase",
    "GetCameraStatusUseCase",
    "ControlPtzUseCase",
    "SendCommandUseCase",
    "ListRecordingDatesUseCase",
    "ListRecordingEventsUseCase",
]
