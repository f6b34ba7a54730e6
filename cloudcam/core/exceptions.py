"""
Exception hierarchy for the device cloud client layer.

Every error raised by the signer, token manager, gateway and the clients built
on top of it inherits from CloudError. The API layer maps these to HTTP
status codes; nothing below it converts a fault into a success value.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class CloudError(Exception):
    """Base exception for all device cloud errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Configuration
# -----------------------------------------------------------------------------


class ConfigurationError(CloudError):
    """Raised at startup when required settings (credentials) are absent."""
    pass


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(CloudError):
    """Raised when caller-supplied input fails a boundary check."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message, details={"field": field} if field else None)
        self.field = field


# -----------------------------------------------------------------------------
# Remote calls
# -----------------------------------------------------------------------------


class TransportError(CloudError):
    """Raised when the device cloud could not be reached or replied with garbage."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class MalformedPayloadError(TransportError):
    """Raised when a successful response does not have the expected shape."""
    pass


class RemoteApiError(CloudError):
    """Raised when the device cloud answered with success=false."""

    def __init__(
        self,
        message: str,
        code: Optional[Any] = None,
        path: Optional[str] = None,
    ):
        super().__init__(
            message,
            details={"code": code, "path": path},
        )
        self.code = code
        self.path = path


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException, default: str = "Something went wrong. Please try again.") -> str:
    """
    Return a user-facing message for any exception.
    Cloud errors carry their own message; anything else gets the default.
    """
    if isinstance(exc, CloudError) and getattr(exc, "user_message", None):
        return exc.user_message
    return default
