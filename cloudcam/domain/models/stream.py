# Standard library imports
from dataclasses import dataclass
from enum import Enum


class StreamProtocol(str, Enum):
    """Streaming protocols the device cloud can allocate URLs for."""
    HLS = "hls"
    RTSP = "rtsp"


@dataclass(frozen=True)
class StreamAllocation:
    """A freshly minted, time-bounded viewing URL. Never cached."""
    protocol: StreamProtocol
    url: str
