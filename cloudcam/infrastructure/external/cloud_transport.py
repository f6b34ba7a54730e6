# Standard library imports
import json
import logging
from typing import Any, Callable, Dict, Optional

# External package imports
import httpx

# Local application imports
from ...core.exceptions import MalformedPayloadError, RemoteApiError, TransportError
from ...core.security import SIGN_METHOD, RequestSigner
from ...utils.datetime_utils import now_ms

logger = logging.getLogger(__name__)

# Longest slice of a response body written to the debug log
_LOGGED_BODY_CHARS = 500


def serialize_body(body: Optional[Any]) -> str:
    """
    Serialize a request body exactly as it is signed and sent.

    Compact separators, no ASCII escaping; an absent body is the empty string.
    """
    if body is None:
        return ""
    return json.dumps(body, separators=(",", ":"), ensure_ascii=False)


class CloudTransport:
    """
    Signs, sends and validates a single device cloud request.

    This is the token-agnostic half of the gateway: the caller decides
    whether an access token is attached. The TokenManager uses it directly
    for the unauthenticated token call.
    """

    def __init__(
        self,
        signer: RequestSigner,
        http_client: httpx.AsyncClient,
        base_url: str,
        clock: Callable[[], float] = now_ms,
    ) -> None:
        """
        Initialize transport.

        Args:
            signer: Request signer holding the project credentials
            http_client: Shared async HTTP client
            base_url: Device cloud base URL (region endpoint)
            clock: Millisecond clock used for the `t` header
        """
        self.signer = signer
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
        self._clock = clock

    def build_headers(
        self,
        method: str,
        path: str,
        body: str,
        access_token: Optional[str] = None,
    ) -> Dict[str, str]:
        """Build the signed header set for one request."""
        timestamp = str(int(self._clock()))
        headers = {
            "client_id": self.signer.access_id,
            "sign": self.signer.sign(method, path, timestamp, access_token, body),
            "t": timestamp,
            "sign_method": SIGN_METHOD,
            "Content-Type": "application/json",
        }
        if access_token:
            headers["access_token"] = access_token
        return headers

    async def send(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        access_token: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Send one signed request and return the parsed response envelope.

        Args:
            method: HTTP method
            path: Request path including query string
            body: JSON-serializable request body, or None
            access_token: Token value for authenticated calls

        Returns:
            Parsed JSON envelope (contains `success`, `result`, `t`, ...)

        Raises:
            TransportError: If the request fails or the body is not a JSON object
            RemoteApiError: If the cloud reports success=false
        """
        method = method.upper()
        body_str = serialize_body(body)
        headers = self.build_headers(method, path, body_str, access_token)
        url = f"{self.base_url}{path}"

        logger.info(f"Cloud API request: {method} {url}")
        try:
            response = await self.http_client.request(
                method,
                url,
                headers=headers,
                content=body_str.encode("utf-8") if body is not None else None,
            )
        except httpx.HTTPError as e:
            logger.error(f"Transport error calling {method} {path}: {e}")
            raise TransportError(
                f"Failed to reach device cloud: {e}",
                path=path,
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(
                f"Device cloud returned a non-JSON response "
                f"(HTTP {response.status_code}) for {method} {path}",
                path=path,
            ) from e

        logger.debug(f"Cloud API response: {json.dumps(data)[:_LOGGED_BODY_CHARS]}")

        if not isinstance(data, dict):
            raise MalformedPayloadError(
                f"Device cloud returned an unexpected payload for {method} {path}",
                path=path,
            )

        if not data.get("success"):
            message = data.get("msg") or f"Cloud API error: {json.dumps(data)}"
            logger.warning(
                f"Cloud API rejected {method} {path}: code={data.get('code')} msg={message}"
            )
            raise RemoteApiError(message, code=data.get("code"), path=path)

        return data
