from .list_devices import ListDevicesUseCase

__all__ = ["ListDevicesUseCase"]
