# Local application imports
from .base_container import BaseContainer
from .providers import (
    CameraProvider,
    CloudProvider,
    DeviceProvider,
    SettingsProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Settings (SettingsProvider)
    2. Cloud clients (CloudProvider) - depends on settings
    3. Use cases (CameraProvider, DeviceProvider) - depend on cloud clients
    """

    def __init__(self) -> None:
        super().__init__()
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: settings → cloud clients → use cases
        """
        # Step 1: Register configuration (foundation)
        SettingsProvider.register(self)

        # Step 2: Register cloud clients (depends on settings)
        CloudProvider.register(self)

        # Step 3: Register use cases (depends on cloud clients)
        CameraProvider.register(self)
        DeviceProvider.register(self)


# Global container instance (singleton pattern)
_container: DIContainer | None = None


def get_container() -> DIContainer:
    """
    Get the global DI container instance (singleton pattern)

    Returns:
        DIContainer instance with all dependencies registered
    """
    global _container
    if _container is None:
        _container = DIContainer()
    return _container


def reset_container() -> None:
    """Drop the global container (used on shutdown and in tests)."""
    global _container
    _container = None
