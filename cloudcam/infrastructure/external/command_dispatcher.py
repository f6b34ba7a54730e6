# Standard library imports
import logging
from typing import Any, List

# Local application imports
from .base_cloud_client import BaseCloudClient, cloud_path
from ...domain.constants.cloud_constants import DEVICE_COMMANDS_PATH, PTZ_CONTROL_CODE
from ...domain.models.command import Command, PTZ_DIRECTION_CODES, PtzDirection

logger = logging.getLogger(__name__)


class CommandDispatcher(BaseCloudClient):
    """
    Sends commands to devices.

    Returns True when the cloud accepted the command. Remote and transport
    errors propagate to the caller unchanged.
    """

    async def ptz(self, device_id: str, direction: PtzDirection) -> bool:
        """
        Move a PTZ camera one step.

        Args:
            device_id: Cloud device id
            direction: Already-validated direction

        Returns:
            True if the command was accepted
        """
        command = Command(code=PTZ_CONTROL_CODE, value=PTZ_DIRECTION_CODES[direction])
        logger.info(f"PTZ {direction.value} on device {device_id}")
        return await self.send(device_id, [command])

    async def command(self, device_id: str, code: str, value: Any) -> bool:
        """
        Forward a code/value pair to a device verbatim.

        Args:
            device_id: Cloud device id
            code: Data point code
            value: Data point value

        Returns:
            True if the command was accepted
        """
        logger.info(f"Sending command {code} to device {device_id}")
        return await self.send(device_id, [Command(code=code, value=value)])

    async def send(self, device_id: str, commands: List[Command]) -> bool:
        """POST a commands batch; the cloud answers result=true when applied."""
        path = cloud_path(DEVICE_COMMANDS_PATH, device_id=device_id)
        result = await self.gateway.post_result(
            path,
            {"commands": [command.to_payload() for command in commands]},
        )
        return result is not False
