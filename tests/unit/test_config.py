"""
Unit tests for Settings.
"""
import os
from unittest.mock import patch

import pytest

from cloudcam.core.config import DiscoverySettings, Settings, get_settings, reset_settings
from cloudcam.core.exceptions import ConfigurationError


class TestSettings:
    """Environment parsing"""

    def test_reads_environment(self, mock_env):
        settings = Settings()

        assert settings.access_id == "test-access-id"
        assert settings.access_secret == "test-access-secret"
        assert settings.cloud_base_url == "https://openapi.example.test"
        assert settings.device_ids == ["dev-1", "dev-2", "dev-3"]
        assert settings.log_level == "DEBUG"

    def test_discovery_settings(self, mock_env):
        assert Settings().discovery() == DiscoverySettings(device_ids=("dev-1", "dev-2", "dev-3"))

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.cloud_base_url == "https://openapi.tuyaeu.com"
        assert settings.http_timeout == 30.0
        assert settings.device_ids == []
        assert "http://localhost:19006" in settings.cors_origins

    def test_cors_origins_override(self):
        with patch.dict(os.environ, {"CORS_ORIGINS": "https://app.example, "}, clear=True):
            assert Settings().cors_origins == ["https://app.example"]

    def test_singleton_and_reset(self, mock_env):
        first = get_settings()
        assert get_settings() is first
        reset_settings()
        assert get_settings() is not first


class TestRequireCredentials:
    """Fail-fast credential check"""

    def test_present(self, mock_env):
        Settings().require_credentials()

    @pytest.mark.parametrize(
        "env, missing",
        [
            ({"TUYA_ACCESS_SECRET": "s"}, "TUYA_ACCESS_ID"),
            ({"TUYA_ACCESS_ID": "a"}, "TUYA_ACCESS_SECRET"),
            ({"TUYA_ACCESS_ID": "  ", "TUYA_ACCESS_SECRET": "s"}, "TUYA_ACCESS_ID"),
        ],
    )
    def test_missing(self, env, missing):
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        with pytest.raises(ConfigurationError) as exc_info:
            settings.require_credentials()
        assert missing in str(exc_info.value)
