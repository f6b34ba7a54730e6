"""Shared httpx client for device cloud calls."""
import httpx
import logging
from typing import Optional

from ..core.config import get_settings

logger = logging.getLogger(__name__)

# Pool sizing for a single upstream host
_POOL_LIMITS = httpx.Limits(
    max_keepalive_connections=20,
    max_connections=100,
    keepalive_expiry=30.0,
)

_shared_client: Optional[httpx.AsyncClient] = None


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Get or create the process-wide async HTTP client.

    Every call to the device cloud goes through this client so concurrent
    requests reuse keep-alive connections to the same region endpoint.
    The timeout applies per request; there is no retry layer on top.

    Returns:
        Shared AsyncClient instance
    """
    global _shared_client

    if _shared_client is None:
        settings = get_settings()
        _shared_client = httpx.AsyncClient(
            timeout=settings.http_timeout,
            limits=_POOL_LIMITS,
            http2=True,
        )
        logger.info(
            f"Created shared HTTP client for {settings.cloud_base_url} "
            f"(timeout {settings.http_timeout}s)"
        )

    return _shared_client


async def close_shared_http_client() -> None:
    """Close the shared client on application shutdown."""
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared HTTP client")
