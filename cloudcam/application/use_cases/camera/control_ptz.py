# Standard library imports
from typing import Optional

# Local application imports
from ....core.exceptions import ValidationError
from ....domain.models.command import PtzDirection
from ....infrastructure.external.command_dispatcher import CommandDispatcher


def parse_direction(direction: Optional[str]) -> PtzDirection:
    """
    Validate a caller-supplied PTZ direction

    Raises:
        ValidationError: If direction is not one of up/down/left/right
    """
    try:
        return PtzDirection(direction)
    except ValueError:
        raise ValidationError("Invalid direction", field="direction")


class ControlPtzUseCase:
    """Use case for moving a PTZ camera"""

    def __init__(self, command_dispatcher: CommandDispatcher) -> None:
        self.command_dispatcher = command_dispatcher

    async def execute(self, device_id: str, direction: Optional[str]) -> bool:
        """
        Move the camera one step in the given direction

        Args:
            device_id: Cloud device id of the camera
            direction: Raw direction from the request body

        Returns:
            True if the device accepted the command

        Raises:
            ValidationError: If direction is invalid (no call is made)
        """
        ptz_direction = parse_direction(direction)
        return await self.command_dispatcher.ptz(device_id, ptz_direction)
