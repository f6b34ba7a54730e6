"""
Unit tests for TokenManager (skew, single-flight refresh, failures).
"""
import asyncio

import pytest

from cloudcam.core.exceptions import MalformedPayloadError, RemoteApiError
from cloudcam.domain.models.token import Token
from tests.cloud_fakes import START_MS, fail, ok, token_result

TOKEN_PATH = "/v1.0/token?grant_type=1"


class TestToken:
    """Tests for Token.is_valid"""

    def test_valid_before_expiry(self):
        assert Token("t", expires_at_ms=START_MS + 1).is_valid(START_MS) is True

    def test_invalid_at_expiry(self):
        assert Token("t", expires_at_ms=START_MS).is_valid(START_MS) is False

    def test_repr_hides_value(self):
        assert "secret-token" not in repr(Token("secret-token", expires_at_ms=0))


class TestEnsureValid:
    """Tests for TokenManager.ensure_valid"""

    @pytest.mark.asyncio
    async def test_unset_token_is_fetched(self, token_manager, fake_cloud):
        fake_cloud.add("GET", TOKEN_PATH, token_result(access_token="tok-1", uid="uid-9"))

        assert token_manager.current is None
        token = await token_manager.ensure_valid()

        assert token.value == "tok-1"
        assert token_manager.account_id == "uid-9"
        assert token.expires_at_ms == START_MS + 7200 * 1000 - 60_000
        assert len(fake_cloud.calls("GET", TOKEN_PATH)) == 1

    @pytest.mark.asyncio
    async def test_token_call_is_unauthenticated(self, token_manager, fake_cloud):
        fake_cloud.add("GET", TOKEN_PATH, token_result())
        await token_manager.ensure_valid()

        request = fake_cloud.calls("GET", TOKEN_PATH)[0]
        assert "access_token" not in request.headers
        assert request.headers["client_id"] == "test-access-id"

    @pytest.mark.asyncio
    async def test_valid_token_is_reused(self, token_manager, fake_cloud, clock):
        fake_cloud.add("GET", TOKEN_PATH, token_result())
        first = await token_manager.ensure_valid()
        clock.advance(60_000)
        second = await token_manager.ensure_valid()

        assert second is first
        assert len(fake_cloud.calls("GET", TOKEN_PATH)) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "server_expire_seconds, expected_token_calls",
        [(61, 1), (59, 2)],
    )
    async def test_expiry_skew(
        self, token_manager, fake_cloud, server_expire_seconds, expected_token_calls
    ):
        """A token 61s from expiry is used; one 59s from expiry is refreshed first."""
        fake_cloud.add(
            "GET",
            TOKEN_PATH,
            token_result(access_token="tok-1", expire_time=server_expire_seconds),
            token_result(access_token="tok-2", expire_time=7200),
        )
        await token_manager.ensure_valid()
        await token_manager.ensure_valid()

        assert len(fake_cloud.calls("GET", TOKEN_PATH)) == expected_token_calls

    @pytest.mark.asyncio
    async def test_expired_token_is_replaced_wholesale(self, token_manager, fake_cloud, clock):
        fake_cloud.add(
            "GET",
            TOKEN_PATH,
            token_result(access_token="tok-1", uid="uid-1"),
            token_result(access_token="tok-2", uid="uid-2"),
        )
        first = await token_manager.ensure_valid()
        clock.advance(7200 * 1000)
        second = await token_manager.ensure_valid()

        assert second is not first
        assert first.value == "tok-1"
        assert (second.value, second.account_id) == ("tok-2", "uid-2")
        assert token_manager.current is second

    @pytest.mark.asyncio
    async def test_is_valid_tracks_expiry(self, token_manager, fake_cloud, clock):
        fake_cloud.add("GET", TOKEN_PATH, token_result(expire_time=120))
        assert token_manager.is_valid() is False

        await token_manager.ensure_valid()
        assert token_manager.is_valid() is True

        clock.advance(60_000)
        assert token_manager.is_valid() is False


class TestSingleFlight:
    """Concurrent callers share one refresh"""

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_refresh(self, token_manager, fake_cloud):
        fake_cloud.add("GET", TOKEN_PATH, token_result())

        tokens = await asyncio.gather(*(token_manager.ensure_valid() for _ in range(10)))

        assert len(fake_cloud.calls("GET", TOKEN_PATH)) == 1
        assert all(token is tokens[0] for token in tokens)

    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_failure(self, token_manager, fake_cloud):
        fake_cloud.add("GET", TOKEN_PATH, fail("sign invalid", 1004))

        results = await asyncio.gather(
            *(token_manager.ensure_valid() for _ in range(5)),
            return_exceptions=True,
        )

        assert len(fake_cloud.calls("GET", TOKEN_PATH)) == 1
        assert all(isinstance(result, RemoteApiError) for result in results)
        assert token_manager.current is None

    @pytest.mark.asyncio
    async def test_failed_refresh_is_retried_by_next_caller(self, token_manager, fake_cloud):
        fake_cloud.add("GET", TOKEN_PATH, fail("sign invalid", 1004), token_result())

        with pytest.raises(RemoteApiError, match="sign invalid"):
            await token_manager.ensure_valid()
        token = await token_manager.ensure_valid()

        assert token.value == "tok-1"
        assert len(fake_cloud.calls("GET", TOKEN_PATH)) == 2


class TestMalformedTokenResponse:
    """Token responses missing required fields"""

    @pytest.mark.asyncio
    async def test_missing_result(self, token_manager, fake_cloud):
        fake_cloud.add("GET", TOKEN_PATH, ok(None))
        with pytest.raises(MalformedPayloadError):
            await token_manager.ensure_valid()

    @pytest.mark.asyncio
    async def test_missing_expire_time(self, token_manager, fake_cloud):
        fake_cloud.add("GET", TOKEN_PATH, ok({"access_token": "tok", "uid": "u"}))
        with pytest.raises(MalformedPayloadError):
            await token_manager.ensure_valid()
