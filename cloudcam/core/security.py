# Standard library imports
import hashlib
import hmac
from dataclasses import dataclass
from typing import Optional

# Local application imports
from .exceptions import ConfigurationError


SIGN_METHOD = "HMAC-SHA256"


@dataclass(frozen=True)
class Credentials:
    """Access id / secret pair issued by the device cloud for this project."""
    access_id: str
    access_secret: str

    def __post_init__(self) -> None:
        if not self.access_id or not self.access_secret:
            raise ConfigurationError("Device cloud credentials not configured")

    def __repr__(self) -> str:
        return f"Credentials(access_id={self.access_id!r}, access_secret='***')"


def content_hash(body: Optional[str]) -> str:
    """
    SHA-256 hex digest of a request body

    Args:
        body: Serialized request body, or None for bodiless requests

    Returns:
        Lowercase hex digest (digest of the empty string when body is empty)
    """
    return hashlib.sha256((body or "").encode("utf-8")).hexdigest()


def build_string_to_sign(method: str, path: str, body: Optional[str] = None) -> str:
    """
    Build the canonical request string.

    Four newline-joined fields: uppercased method, body digest, an empty
    headers field, and the request path including its query string.
    """
    return "\n".join([method.upper(), content_hash(body), "", path])


class RequestSigner:
    """
    Signs outbound device cloud requests with HMAC-SHA256.

    The signature is a pure function of (method, path, body, token, timestamp);
    the signer holds no state besides the credentials.
    """

    def __init__(self, credentials: Credentials) -> None:
        self.credentials = credentials

    @property
    def access_id(self) -> str:
        return self.credentials.access_id

    def sign(
        self,
        method: str,
        path: str,
        timestamp: str,
        access_token: Optional[str] = None,
        body: Optional[str] = None,
    ) -> str:
        """
        Compute the request signature

        Args:
            method: HTTP method
            path: Request path with query string, as sent on the wire
            timestamp: Millisecond epoch timestamp sent in the `t` header
            access_token: Token value for authenticated calls, None otherwise
            body: Serialized JSON body, or None

        Returns:
            Uppercase hex HMAC-SHA256 signature
        """
        message = (
            self.credentials.access_id
            + (access_token or "")
            + timestamp
            + build_string_to_sign(method, path, body)
        )
        digest = hmac.new(
            self.credentials.access_secret.encode("utf-8"),
            message.encode("utf-8"),
            hashlib.sha256,
        ).hexdigest()
        return digest.upper()
