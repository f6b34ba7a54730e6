from typing import TYPE_CHECKING

from ...core.config import Settings
from ...core.security import Credentials, RequestSigner
from ...infrastructure.http_client_factory import get_shared_http_client
from ...infrastructure.external.cloud_transport import CloudTransport
from ...infrastructure.external.token_manager import TokenManager
from ...infrastructure.external.cloud_gateway import CloudGateway
from ...infrastructure.external.device_client import DeviceClient
from ...infrastructure.external.device_discovery import DeviceDiscovery
from ...infrastructure.external.stream_resolver import StreamResolver
from ...infrastructure.external.command_dispatcher import CommandDispatcher

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class CloudProvider:
    """Device cloud provider - registers the signer, token manager, gateway and clients"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register cloud components as singletons.
        One TokenManager is shared by everything that talks to the cloud.

        Raises:
            ConfigurationError: If credentials are missing
        """
        settings = container.get(Settings)
        settings.require_credentials()

        signer = RequestSigner(Credentials(settings.access_id, settings.access_secret))
        transport = CloudTransport(
            signer=signer,
            http_client=get_shared_http_client(),
            base_url=settings.cloud_base_url,
        )
        token_manager = TokenManager(transport)
        gateway = CloudGateway(transport, token_manager)
        device_client = DeviceClient(gateway)

        container.register_singleton(RequestSigner, signer)
        container.register_singleton(CloudTransport, transport)
        container.register_singleton(TokenManager, token_manager)
        container.register_singleton(CloudGateway, gateway)
        container.register_singleton(DeviceClient, device_client)
        container.register_singleton(
            DeviceDiscovery,
            DeviceDiscovery.create(gateway, token_manager, device_client, settings.discovery()),
        )
        container.register_singleton(StreamResolver, StreamResolver(gateway))
        container.register_singleton(CommandDispatcher, CommandDispatcher(gateway))
