"""Device cloud clients: signing transport, shared token, gateway and the clients built on it"""

from .cloud_transport import CloudTransport
from .token_manager import TokenManager
from .cloud_gateway import CloudGateway
from .device_client import DeviceClient
from .device_discovery import DeviceDiscovery
from .stream_resolver import StreamResolver
from .command_dispatcher import CommandDispatcher

__all__ = [
    "CloudTransport",
    "TokenManager",
    "CloudGateway",
    "DeviceClient",
    "DeviceDiscovery",
    "StreamResolver",
    "CommandDispatcher",
]
