# Standard library imports
from typing import Any, Optional

# Local application imports
from ....core.exceptions import ValidationError
from ....infrastructure.external.command_dispatcher import CommandDispatcher


class SendCommandUseCase:
    """Use case for sending a generic data point command to a device"""

    def __init__(self, command_dispatcher: CommandDispatcher) -> None:
        self.command_dispatcher = command_dispatcher

    async def execute(self, device_id: str, code: Optional[str], value: Any) -> bool:
        """
        Forward a code/value command

        Raises:
            ValidationError: If code is missing or blank (no call is made)
        """
        if not isinstance(code, str) or not code.strip():
            raise ValidationError("Command code is required", field="code")
        return await self.command_dispatcher.command(device_id, code, value)
