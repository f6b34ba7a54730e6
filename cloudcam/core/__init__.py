from .config import Settings, get_settings
from .exceptions import (
    CloudError,
    ConfigurationError,
    MalformedPayloadError,
    RemoteApiError,
    TransportError,
    ValidationError,
)
from .security import Credentials, RequestSigner

__all__ = [
    "Settings",
    "get_settings",
    "CloudError",
    "ConfigurationError",
    "MalformedPayloadError",
    "RemoteApiError",
    "TransportError",
    "ValidationError",
    "Credentials",
    "RequestSigner",
]
