from .camera import (
    ListCamerasUseCase,
    GetCameraStreamUseCase,
    GetCameraStatusUseCase,
    ControlPtzUseCase,
    SendCommandUseCase,
    ListRecordingDatesUseCase,
    ListRecordingEventsUseCase,
)
from .device import ListDevicesUseCase

__all__ = [
    "ListCamerasUseCase",
    "GetCameraStreamUseCase",
    "GetCameraStatusUseCase",
    "ControlPtzUseCase",
    "SendCommandUseCase",
    "ListRecordingDatesUseCase",
    "ListRecordingEventsUseCase",
    "ListDevicesUseCase",
]
