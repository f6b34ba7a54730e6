"""Constants for domain model field names and cloud vocabulary"""

from .camera_fields import CameraFields

__all__ = [
    "CameraFields",
]
