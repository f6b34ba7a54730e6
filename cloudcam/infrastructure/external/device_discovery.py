# Standard library imports
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

# Local application imports
from .base_cloud_client import cloud_path
from .cloud_gateway import CloudGateway
from .device_client import DeviceClient, parse_device_record
from .token_manager import TokenManager
from ...application.dto.device_dto import DeviceRecord
from ...core.config import DiscoverySettings
from ...core.exceptions import CloudError, MalformedPayloadError
from ...domain.constants.cloud_constants import USER_DEVICES_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveryResult:
    """Outcome of one discovery strategy."""
    succeeded: bool
    devices: List[DeviceRecord] = field(default_factory=list)

    @classmethod
    def failed(cls) -> "DiscoveryResult":
        return cls(succeeded=False)


class DiscoveryStrategy(ABC):
    """One way of resolving the account's device list."""

    name: str = "strategy"

    @abstractmethod
    async def discover(self) -> DiscoveryResult:
        """Return a successful result to stop the chain, a failed one to move on."""


class AutoDiscoveryStrategy(DiscoveryStrategy):
    """
    Resolve devices from the account id that came with the access token.

    Succeeds only with a non-empty device list. Token failures, missing
    account ids and remote errors defer to the next strategy; a response
    that does not look like a device list is raised.
    """

    name = "auto-discovery"

    def __init__(self, gateway: CloudGateway, token_manager: TokenManager) -> None:
        self.gateway = gateway
        self.token_manager = token_manager

    async def discover(self) -> DiscoveryResult:
        try:
            await self.token_manager.ensure_valid()
        except CloudError as e:
            logger.warning(f"Token refresh failed, skipping auto-discovery: {e}")
            return DiscoveryResult.failed()

        account_id = self.token_manager.account_id
        if not account_id:
            logger.info("Token carries no account id, skipping auto-discovery")
            return DiscoveryResult.failed()

        path = cloud_path(USER_DEVICES_PATH, uid=account_id)
        logger.info(f"Auto-discovering devices for account {account_id}")
        try:
            result = await self.gateway.get_result(path)
        except MalformedPayloadError:
            raise
        except CloudError as e:
            logger.info(f"Auto-discovery not available, falling back to configured IDs: {e}")
            return DiscoveryResult.failed()

        devices = self._parse_devices(result, path)
        if not devices:
            logger.info("Auto-discovery returned no devices")
            return DiscoveryResult.failed()

        logger.info(f"Auto-discovered {len(devices)} devices")
        return DiscoveryResult(succeeded=True, devices=devices)

    @staticmethod
    def _parse_devices(result: Any, path: str) -> List[DeviceRecord]:
        if result is None:
            return []
        # Paged variant of the endpoint wraps the list
        if isinstance(result, dict) and "devices" in result:
            result = result["devices"]
        if not isinstance(result, list):
            raise MalformedPayloadError(f"Expected a device list from {path}", path=path)
        return [parse_device_record(raw, path) for raw in result]


class ConfiguredDevicesStrategy(DiscoveryStrategy):
    """
    Fetch each operator-configured device id one by one.

    Always succeeds: failed lookups are logged and skipped, so the result
    holds whatever resolved, possibly nothing.
    """

    name = "configured-devices"

    def __init__(self, device_client: DeviceClient, device_ids: Sequence[str]) -> None:
        self.device_client = device_client
        self.device_ids = tuple(device_ids)

    async def discover(self) -> DiscoveryResult:
        if not self.device_ids:
            logger.warning("No devices found - please configure TUYA_DEVICE_IDS")
            return DiscoveryResult(succeeded=True, devices=[])

        logger.info(f"Fetching {len(self.device_ids)} configured devices...")
        devices: List[DeviceRecord] = []
        for device_id in self.device_ids:
            try:
                device = await self.device_client.get_device(device_id)
            except CloudError as e:
                logger.error(f"Error fetching device {device_id}: {e}")
                continue
            if device is not None:
                devices.append(device)

        logger.info(f"Found {len(devices)} devices")
        return DiscoveryResult(succeeded=True, devices=devices)


class DeviceDiscovery:
    """
    Resolves the raw device list by trying strategies in order.

    The default chain prefers auto-discovery and falls back to the
    configured device ids.
    """

    def __init__(self, strategies: Sequence[DiscoveryStrategy]) -> None:
        self.strategies = list(strategies)

    @classmethod
    def create(
        cls,
        gateway: CloudGateway,
        token_manager: TokenManager,
        device_client: DeviceClient,
        settings: Optional[DiscoverySettings] = None,
    ) -> "DeviceDiscovery":
        """Build the default auto-discovery -> configured ids chain."""
        settings = settings or DiscoverySettings()
        return cls([
            AutoDiscoveryStrategy(gateway, token_manager),
            ConfiguredDevicesStrategy(device_client, settings.device_ids),
        ])

    async def list_devices(self) -> List[DeviceRecord]:
        """
        Resolve the device list.

        Returns:
            Device records in the order the winning strategy produced them;
            empty if no strategy succeeded
        """
        for strategy in self.strategies:
            result = await strategy.discover()
            if result.succeeded:
                logger.debug(f"Discovery resolved by {strategy.name}")
                return result.devices
        return []
