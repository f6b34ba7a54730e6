# Standard library imports
import asyncio
import logging
from typing import Any, Callable, Optional

# Local application imports
from .cloud_transport import CloudTransport
from ...core.exceptions import MalformedPayloadError
from ...domain.constants.cloud_constants import TOKEN_EXPIRY_SKEW_MS, TOKEN_PATH
from ...domain.models.token import Token
from ...utils.datetime_utils import now_ms

logger = logging.getLogger(__name__)


class TokenManager:
    """
    Owns the single access token shared by every outbound call.

    Lifecycle: UNSET -> VALID -> EXPIRED -> VALID -> ...

    Refreshes are single-flight: when several callers find the token
    missing or expired at the same time, one refresh runs and all of them
    receive its outcome (the new token or the same exception).
    """

    def __init__(
        self,
        transport: CloudTransport,
        clock: Callable[[], float] = now_ms,
    ) -> None:
        """
        Initialize token manager.

        Args:
            transport: Signed transport used for the unauthenticated token call
            clock: Millisecond clock; injectable for tests
        """
        self.transport = transport
        self._clock = clock
        self._token: Optional[Token] = None
        self._refresh_task: Optional[asyncio.Task] = None

    @property
    def current(self) -> Optional[Token]:
        """The token currently held, valid or not."""
        return self._token

    @property
    def account_id(self) -> Optional[str]:
        """Account (user) id returned with the last token, if any."""
        return self._token.account_id if self._token else None

    def is_valid(self) -> bool:
        return self._token is not None and self._token.is_valid(self._clock())

    async def ensure_valid(self) -> Token:
        """
        Return a usable token, refreshing it first if needed.

        Returns:
            A token with now < expires_at_ms

        Raises:
            CloudError: If the refresh call fails
        """
        if self.is_valid():
            return self._token

        if self._refresh_task is None:
            self._refresh_task = asyncio.ensure_future(self._refresh())
            self._refresh_task.add_done_callback(self._on_refresh_done)
        else:
            logger.debug("Token refresh already in flight, waiting for it")

        # A cancelled waiter must not cancel the refresh the others share
        return await asyncio.shield(self._refresh_task)

    def _on_refresh_done(self, task: asyncio.Task) -> None:
        if self._refresh_task is task:
            self._refresh_task = None
        # Mark the exception retrieved even if every waiter was cancelled
        if not task.cancelled():
            task.exception()

    async def _refresh(self) -> Token:
        logger.info("Refreshing device cloud access token")
        data = await self.transport.send("GET", TOKEN_PATH)
        token = self._parse_token(data.get("result"))
        self._token = token
        logger.info(f"Token refreshed, account id: {token.account_id}")
        return token

    def _parse_token(self, result: Any) -> Token:
        if not isinstance(result, dict):
            raise MalformedPayloadError("Token response has no result object", path=TOKEN_PATH)

        access_token = result.get("access_token")
        expire_time = result.get("expire_time")
        if not access_token or not isinstance(expire_time, (int, float)):
            raise MalformedPayloadError(
                "Token response is missing access_token or expire_time",
                path=TOKEN_PATH,
            )

        expires_at_ms = int(self._clock() + expire_time * 1000 - TOKEN_EXPIRY_SKEW_MS)
        return Token(
            value=access_token,
            expires_at_ms=expires_at_ms,
            account_id=result.get("uid") or None,
        )
