from .settings_provider import SettingsProvider
from .cloud_provider import CloudProvider
from .camera_provider import CameraProvider
from .device_provider import DeviceProvider


__all__ = [
    "SettingsProvider",
    "CloudProvider",
    "CameraProvider",
    "DeviceProvider",
]
