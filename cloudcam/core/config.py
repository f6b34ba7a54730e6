# Standard library imports
import os
from dataclasses import dataclass
from typing import Final, List, Optional, Tuple

# Local application imports
from .exceptions import ConfigurationError


def _split_csv(raw: Optional[str]) -> List[str]:
    """Split a comma-separated environment value, dropping blanks."""
    if not raw:
        return []
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass(frozen=True)
class DiscoverySettings:
    """Operator-supplied inputs for device discovery."""
    device_ids: Tuple[str, ...] = ()


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    Credentials have no default: use require_credentials() to fail fast
    when they are missing.
    """

    def __init__(self) -> None:
        # Device cloud credentials
        self.access_id: Final[str] = os.getenv("TUYA_ACCESS_ID", "").strip()
        self.access_secret: Final[str] = os.getenv("TUYA_ACCESS_SECRET", "").strip()

        # Device cloud endpoint
        self.cloud_base_url: Final[str] = os.getenv(
            "TUYA_BASE_URL",
            "https://openapi.tuyaeu.com"
        ).rstrip("/")
        self.http_timeout: Final[float] = float(os.getenv("TUYA_HTTP_TIMEOUT", "30"))

        # Discovery fallback list
        self.device_ids: Final[List[str]] = _split_csv(os.getenv("TUYA_DEVICE_IDS"))

        # Server Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()
        self.cors_origins: Final[List[str]] = _split_csv(os.getenv("CORS_ORIGINS")) or [
            "http://localhost:8081",
            "http://localhost:19006",
            "http://localhost:3000",
        ]

    def require_credentials(self) -> None:
        """
        Validate that the device cloud credentials are present.

        Raises:
            ConfigurationError: If the access id or secret is missing
        """
        missing = [
            name
            for name, value in (
                ("TUYA_ACCESS_ID", self.access_id),
                ("TUYA_ACCESS_SECRET", self.access_secret),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(
                f"Device cloud credentials not configured: {', '.join(missing)}"
            )

    def discovery(self) -> DiscoverySettings:
        """Discovery inputs as one immutable object."""
        return DiscoverySettings(device_ids=tuple(self.device_ids))


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
