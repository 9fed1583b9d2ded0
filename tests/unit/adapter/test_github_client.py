"""Unit tests for the OAuth state handling of RealGitHubOAuthClient."""

from urllib.parse import parse_qs, urlparse

import pytest

from discuss.adapter.github.client import GitHubOAuthError, RealGitHubOAuthClient


class FakeClock:
    """Manually advanced time source."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _client(clock: FakeClock) -> RealGitHubOAuthClient:
    return RealGitHubOAuthClient(
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="http://localhost:8000/auth/callback/github",
        clock=clock,
    )


class TestAuthorizationState:
    """Tests for issuing and consuming OAuth states."""

    @pytest.mark.asyncio
    async def test_authorization_url_carries_state(self):
        client = _client(FakeClock())

        url = await client.initiate_authorization("abc")

        params = parse_qs(urlparse(url).query)
        assert params["state"] == ["abc"]
        assert params["client_id"] == ["client-id"]

    @pytest.mark.asyncio
    async def test_unknown_state_is_rejected(self):
        client = _client(FakeClock())

        with pytest.raises(GitHubOAuthError, match="Invalid or expired state"):
            await client.complete_authorization("code", "never-issued")

    @pytest.mark.asyncio
    async def test_expired_state_is_rejected_and_forgotten(self):
        clock = FakeClock()
        client = _client(clock)
        await client.initiate_authorization("abc")
        clock.now += client.state_ttl + 1

        with pytest.raises(GitHubOAuthError, match="Invalid or expired state"):
            await client.complete_authorization("code", "abc")
        assert "abc" not in client._pending_states

    @pytest.mark.asyncio
    async def test_expired_states_pruned_on_new_login(self):
        clock = FakeClock()
        client = _client(clock)
        await client.initiate_authorization("old")
        clock.now += client.state_ttl + 1

        await client.initiate_authorization("new")

        assert list(client._pending_states) == ["new"]

    @pytest.mark.asyncio
    async def test_oldest_state_evicted_at_capacity(self):
        clock = FakeClock()
        client = _client(clock)
        client.max_pending_states = 3
        for state in ["a", "b", "c", "d"]:
            await client.initiate_authorization(state)
            clock.now += 1

        assert list(client._pending_states) == ["b", "c", "d"]
        with pytest.raises(GitHubOAuthError):
            await client.complete_authorization("code", "a")
