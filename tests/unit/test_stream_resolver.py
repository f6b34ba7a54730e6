"""
Unit tests for StreamResolver.
"""
import json

import httpx
import pytest

from cloudcam.domain.models.stream import StreamProtocol
from cloudcam.infrastructure.external.stream_resolver import StreamResolver
from tests.cloud_fakes import fail, ok, token_result

TOKEN_PATH = "/v1.0/token?grant_type=1"
ALLOCATE_PATH = "/v1.0/devices/abc/stream/actions/allocate"


def _by_type(responses):
    """Answer the allocate call based on the requested protocol."""
    def respond(request: httpx.Request) -> httpx.Response:
        scripted = responses[json.loads(request.content)["type"]]
        if isinstance(scripted, Exception):
            raise scripted
        return httpx.Response(200, json=scripted)

    return respond


@pytest.fixture
def resolver(gateway, fake_cloud):
    fake_cloud.add("GET", TOKEN_PATH, token_result())
    return StreamResolver(gateway)


class TestStreamResolver:
    """Protocol fallback chain"""

    @pytest.mark.asyncio
    async def test_hls_first(self, resolver, fake_cloud):
        fake_cloud.add("POST", ALLOCATE_PATH, ok({"url": "https://cdn.example/abc.m3u8"}))

        assert await resolver.allocate("abc") == "https://cdn.example/abc.m3u8"
        assert fake_cloud.json_bodies("POST", ALLOCATE_PATH) == [{"type": "hls"}]

    @pytest.mark.asyncio
    async def test_falls_back_to_rtsp(self, resolver, fake_cloud):
        fake_cloud.add(
            "POST",
            ALLOCATE_PATH,
            _by_type({"hls": fail("not supported", 2001), "rtsp": ok({"url": "rtsp://x/abc"})}),
        )

        allocation = await resolver.allocate_stream("abc")

        assert allocation.protocol is StreamProtocol.RTSP
        assert allocation.url == "rtsp://x/abc"
        assert fake_cloud.json_bodies("POST", ALLOCATE_PATH) == [{"type": "hls"}, {"type": "rtsp"}]

    @pytest.mark.asyncio
    async def test_transport_error_moves_on(self, resolver, fake_cloud):
        fake_cloud.add(
            "POST",
            ALLOCATE_PATH,
            _by_type({"hls": httpx.ConnectError("refused"), "rtsp": ok({"url": "rtsp://x/abc"})}),
        )

        assert await resolver.allocate("abc") == "rtsp://x/abc"

    @pytest.mark.asyncio
    async def test_empty_url_moves_on(self, resolver, fake_cloud):
        fake_cloud.add(
            "POST",
            ALLOCATE_PATH,
            _by_type({"hls": ok({"url": ""}), "rtsp": ok({"url": "rtsp://x/abc"})}),
        )

        assert await resolver.allocate("abc") == "rtsp://x/abc"

    @pytest.mark.asyncio
    async def test_all_protocols_fail_returns_none(self, resolver, fake_cloud):
        fake_cloud.add("POST", ALLOCATE_PATH, fail("device offline", 2002))

        assert await resolver.allocate("abc") is None
        assert len(fake_cloud.calls("POST", ALLOCATE_PATH)) == 2

    @pytest.mark.asyncio
    async def test_custom_protocol_chain(self, gateway, fake_cloud):
        fake_cloud.add("GET", TOKEN_PATH, token_result())
        fake_cloud.add("POST", ALLOCATE_PATH, ok({"url": "rtsp://x/abc"}))

        resolver = StreamResolver(gateway, protocols=[StreamProtocol.RTSP])

        assert await resolver.allocate("abc") == "rtsp://x/abc"
        assert fake_cloud.json_bodies("POST", ALLOCATE_PATH) == [{"type": "rtsp"}]

    @pytest.mark.asyncio
    async def test_token_failure_returns_none(self, gateway, fake_cloud):
        fake_cloud.add("GET", TOKEN_PATH, fail("sign invalid", 1004))

        assert await StreamResolver(gateway).allocate("abc") is None
        assert fake_cloud.calls("POST", ALLOCATE_PATH) == []
