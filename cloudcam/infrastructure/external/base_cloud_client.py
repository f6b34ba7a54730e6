# Standard library imports
from typing import Any
from urllib.parse import quote

# Local application imports
from .cloud_gateway import CloudGateway


def cloud_path(template: str, **params: Any) -> str:
    """
    Fill an endpoint path template.

    Every value is percent-encoded as a single path segment, so an id
    containing "/", "?" or "#" cannot change which endpoint is called.
    """
    return template.format(**{name: quote(str(value), safe="") for name, value in params.items()})


class BaseCloudClient:
    """
    Base class for device cloud clients.

    Provides the shared gateway every client sends its calls through.
    """

    def __init__(self, gateway: CloudGateway) -> None:
        """
        Initialize base cloud client.

        Args:
            gateway: Gateway holding the signer, transport and shared token
        """
        self.gateway = gateway
