# Standard library imports
from typing import Optional

# Local application imports
from ....infrastructure.external.stream_resolver import StreamResolver


class GetCameraStreamUseCase:
    """Use case for allocating a live stream URL for one camera"""

    def __init__(self, stream_resolver: StreamResolver) -> None:
        self.stream_resolver = stream_resolver

    async def execute(self, device_id: str) -> Optional[str]:
        """
        Allocate a stream URL

        Args:
            device_id: Cloud device id of the camera

        Returns:
            Stream URL, or None when no protocol is available
        """
        return await self.stream_resolver.allocate(device_id)
