# Standard library imports
import asyncio
import logging
from typing import List

# Local application imports
from ....domain.models.camera import Camera
from ....infrastructure.external.device_discovery import DeviceDiscovery
from ....infrastructure.external.stream_resolver import StreamResolver
from ...dto.camera_dto import CameraResponse
from ...services.camera_resolver import resolve_cameras

logger = logging.getLogger(__name__)


def to_camera_response(camera: Camera) -> CameraResponse:
    """Convert the domain camera into its API representation"""
    return CameraResponse(
        id=camera.id,
        name=camera.name,
        device_id=camera.device_id,
        is_online=camera.is_online,
        supports_ptz=camera.supports_ptz,
        category=camera.category,
        last_seen=camera.last_seen_iso,
        stream_url=camera.stream_url,
    )


class ListCamerasUseCase:
    """Use case for listing the account's cameras"""

    def __init__(
        self,
        device_discovery: DeviceDiscovery,
        stream_resolver: StreamResolver,
    ) -> None:
        self.device_discovery = device_discovery
        self.stream_resolver = stream_resolver

    async def execute(self, include_streams: bool = False) -> List[CameraResponse]:
        """
        Discover devices and map the camera-like ones

        Args:
            include_streams: Also allocate a stream URL for every online camera

        Returns:
            List of CameraResponse objects, in discovery order
        """
        devices = await self.device_discovery.list_devices()
        cameras = resolve_cameras(devices)
        logger.info(f"Found {len(cameras)} cameras out of {len(devices)} devices")

        if include_streams:
            cameras = await asyncio.gather(*(self._attach_stream(camera) for camera in cameras))

        return [to_camera_response(camera) for camera in cameras]

    async def _attach_stream(self, camera: Camera) -> Camera:
        if not camera.is_online:
            return camera
        stream_url = await self.stream_resolver.allocate(camera.id)
        return camera.with_stream(stream_url)
