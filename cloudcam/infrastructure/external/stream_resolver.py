# Standard library imports
import logging
from typing import Optional, Sequence

# Local application imports
from .base_cloud_client import BaseCloudClient, cloud_path
from .cloud_gateway import CloudGateway
from ...core.exceptions import CloudError
from ...domain.constants.cloud_constants import STREAM_ALLOCATE_PATH
from ...domain.models.stream import StreamAllocation, StreamProtocol

logger = logging.getLogger(__name__)

# Tried in order until one yields a URL
DEFAULT_PROTOCOLS = (StreamProtocol.HLS, StreamProtocol.RTSP)


class StreamResolver(BaseCloudClient):
    """
    Allocates viewing URLs for cameras.

    Each protocol in the chain is tried in turn; a remote error, transport
    error or empty URL moves on to the next one. Running out of protocols
    is an expected outcome and yields None, not an exception.
    """

    def __init__(
        self,
        gateway: CloudGateway,
        protocols: Sequence[StreamProtocol] = DEFAULT_PROTOCOLS,
    ) -> None:
        super().__init__(gateway)
        self.protocols = tuple(protocols)

    async def allocate(self, device_id: str) -> Optional[str]:
        """
        Allocate a stream URL for a camera.

        Args:
            device_id: Cloud device id

        Returns:
            Stream URL, or None if no protocol could be allocated
        """
        allocation = await self.allocate_stream(device_id)
        return allocation.url if allocation else None

    async def allocate_stream(self, device_id: str) -> Optional[StreamAllocation]:
        """
        Allocate a stream and report which protocol it uses.

        Args:
            device_id: Cloud device id

        Returns:
            StreamAllocation for the first protocol that worked, or None
        """
        path = cloud_path(STREAM_ALLOCATE_PATH, device_id=device_id)
        for protocol in self.protocols:
            try:
                result = await self.gateway.post_result(path, {"type": protocol.value})
            except CloudError as e:
                logger.error(f"Error getting {protocol.name} stream URL for {device_id}: {e}")
                continue

            url = result.get("url") if isinstance(result, dict) else None
            if url:
                logger.info(f"Allocated {protocol.name} stream for device {device_id}")
                return StreamAllocation(protocol=protocol, url=url)
            logger.warning(f"{protocol.name} allocation for {device_id} returned no URL")

        logger.warning(f"No stream available for device {device_id}")
        return None
