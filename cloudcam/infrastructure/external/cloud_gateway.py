# Standard library imports
from typing import Any, Dict, Optional

# Local application imports
from .cloud_transport import CloudTransport
from .token_manager import TokenManager


class CloudGateway:
    """
    Executes device cloud calls end to end.

    Authenticated calls first make sure the shared token is valid, then the
    transport signs the request (with the token), sends it and validates the
    response envelope. Failures are raised, never swallowed or retried.
    """

    def __init__(self, transport: CloudTransport, token_manager: TokenManager) -> None:
        self.transport = transport
        self.token_manager = token_manager

    async def execute(
        self,
        method: str,
        path: str,
        body: Optional[Any] = None,
        requires_auth: bool = True,
    ) -> Dict[str, Any]:
        """
        Execute one signed call.

        Args:
            method: HTTP method
            path: Request path including query string
            body: JSON-serializable body, or None
            requires_auth: Attach (and if needed refresh) the access token

        Returns:
            Parsed response envelope

        Raises:
            TransportError: Network failure or unparseable response
            RemoteApiError: The cloud answered with success=false
        """
        access_token = None
        if requires_auth:
            token = await self.token_manager.ensure_valid()
            access_token = token.value
        return await self.transport.send(method, path, body=body, access_token=access_token)

    async def get_result(self, path: str) -> Any:
        """GET an authenticated path and return the envelope's `result`."""
        data = await self.execute("GET", path)
        return data.get("result")

    async def post_result(self, path: str, body: Any) -> Any:
        """POST an authenticated path and return the envelope's `result`."""
        data = await self.execute("POST", path, body=body)
        return data.get("result")
