from .camera import Camera
from .command import Command, PtzDirection, PTZ_DIRECTION_CODES
from .stream import StreamAllocation, StreamProtocol
from .token import Token

__all__ = [
    "Camera",
    "Command",
    "PtzDirection",
    "PTZ_DIRECTION_CODES",
    "StreamAllocation",
    "StreamProtocol",
    "Token",
]
