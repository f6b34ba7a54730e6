"""
Shared pytest fixtures for cloudcam tests.
"""
import os
from unittest.mock import patch

import httpx
import pytest

from cloudcam.core.config import reset_settings
from cloudcam.core.security import Credentials, RequestSigner
from cloudcam.infrastructure.external.cloud_gateway import CloudGateway
from cloudcam.infrastructure.external.cloud_transport import CloudTransport
from cloudcam.infrastructure.external.token_manager import TokenManager
from tests.cloud_fakes import ACCESS_ID, ACCESS_SECRET, BASE_URL, FakeClock, FakeCloud


@pytest.fixture
def mock_env():
    """Fixture to set the device cloud environment variables."""
    env_vars = {
        "TUYA_ACCESS_ID": ACCESS_ID,
        "TUYA_ACCESS_SECRET": ACCESS_SECRET,
        "TUYA_DEVICE_IDS": "dev-1, dev-2,,dev-3",
        "TUYA_BASE_URL": BASE_URL + "/",
        "LOG_LEVEL": "debug",
    }
    reset_settings()
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars
    reset_settings()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def fake_cloud() -> FakeCloud:
    return FakeCloud()


@pytest.fixture
def signer() -> RequestSigner:
    return RequestSigner(Credentials(ACCESS_ID, ACCESS_SECRET))


@pytest.fixture
def transport(fake_cloud, signer, clock) -> CloudTransport:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_cloud.handler))
    return CloudTransport(signer=signer, http_client=http_client, base_url=BASE_URL, clock=clock)


@pytest.fixture
def token_manager(transport, clock) -> TokenManager:
    return TokenManager(transport, clock=clock)


@pytest.fixture
def gateway(transport, token_manager) -> CloudGateway:
    return CloudGateway(transport, token_manager)
