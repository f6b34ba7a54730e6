# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class PtzDirection(str, Enum):
    """Pan/tilt directions accepted by the PTZ endpoint."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Opaque values understood by the device's ptz_control data point
PTZ_DIRECTION_CODES: Dict[PtzDirection, str] = {
    PtzDirection.UP: "0",
    PtzDirection.RIGHT: "2",
    PtzDirection.DOWN: "4",
    PtzDirection.LEFT: "6",
}


@dataclass(frozen=True)
class Command:
    """Opaque code/value pair forwarded verbatim to a device."""
    code: str
    value: Any = None

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Command code is required")

    def to_payload(self) -> Dict[str, Any]:
        return {"code": self.code, "value": self.value}
