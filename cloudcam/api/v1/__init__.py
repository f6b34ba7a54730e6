from .health_controller import router as health_router
from .camera_controller import router as camera_router
from .device_controller import router as device_router


__all__ = ["health_router", "camera_router", "device_router"]
