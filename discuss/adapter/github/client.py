"""GitHub OAuth app client.

Implements the web application flow: redirect to GitHub, exchange the
returned code for an access token, then read the user's profile.
"""

import time
from typing import Callable
from urllib.parse import urlencode

import httpx
import logfire

from discuss.adapter.error import ProviderError
from discuss.domain.service.auth_service import OAuthClient
from discuss.domain.value.types import AuthProvider, OAuthProviderInfo


class GitHubOAuthError(ProviderError):
    """GitHub OAuth error."""

    pass


class GitHubOAuthClient(OAuthClient):
    """Base class for GitHub OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGitHubOAuthClient(GitHubOAuthClient):
    """GitHub OAuth client talking to github.com."""

    # Seconds a login attempt may take between redirect and callback
    state_ttl = 600.0
    # Oldest states are dropped past this many outstanding logins
    max_pending_states = 10_000

    authorize_url = "https://github.com/login/oauth/authorize"
    token_url = "https://github.com/login/oauth/access_token"
    user_info_url = "https://api.github.com/user"
    emails_url = "https://api.github.com/user/emails"

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize GitHub OAuth client.

        Args:
            client_id: GitHub OAuth app client ID
            client_secret: GitHub OAuth app client secret
            redirect_uri: Callback URL registered with the OAuth app
            clock: Monotonic time source used to expire states
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri

        self._clock = clock
        # States issued by this process and when, consumed on callback
        self._pending_states: dict[str, float] = {}

    async def initiate_authorization(self, state: str) -> str:
        """Build the GitHub authorization URL.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        self._prune_states()
        self._pending_states[state] = self._clock()

        params = {
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": "read:user user:email",
            "state": state,
        }
        auth_url = f"{self.authorize_url}?{urlencode(params)}"

        logfire.info(
            "GitHub OAuth authorization initiated",
            state=state,
            redirect_uri=self.redirect_uri,
        )
        return auth_url

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Complete GitHub OAuth authorization flow.

        Args:
            code: Authorization code from GitHub callback
            state: State parameter for verification

        Returns:
            User information from GitHub

        Raises:
            GitHubOAuthError: If the state is unknown or a GitHub call fails
        """
        issued_at = self._pending_states.pop(state, None)
        if issued_at is None or self._clock() - issued_at > self.state_ttl:
            raise GitHubOAuthError("Invalid or expired state")

        async with httpx.AsyncClient(timeout=30.0) as client:
            access_token = await self._exchange_code_for_token(client, code)
            user_info = await self._get_user_info(client, access_token)
            email = user_info.get("email") or await self._get_primary_email(
                client, access_token
            )

        logfire.info(
            "GitHub OAuth completed",
            login=user_info["login"],
            user_id=user_info["id"],
        )

        return OAuthProviderInfo(
            provider=AuthProvider.GITHUB,
            provider_user_id=str(user_info["id"]),  # Stable across login renames
            login=user_info["login"],
            email=email,
            display_name=user_info.get("name"),
            avatar_url=user_info.get("avatar_url"),
        )

    def _prune_states(self) -> None:
        """Drop expired states, then the oldest ones while at capacity."""
        cutoff = self._clock() - self.state_ttl
        # Insertion order is issue order
        for state, issued_at in list(self._pending_states.items()):
            full = len(self._pending_states) >= self.max_pending_states
            if issued_at >= cutoff and not full:
                break
            del self._pending_states[state]

    async def _exchange_code_for_token(
        self, client: httpx.AsyncClient, code: str
    ) -> str:
        """Exchange authorization code for access token.

        Raises:
            GitHubOAuthError: If token exchange fails
        """
        data = {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
            "redirect_uri": self.redirect_uri,
        }

        try:
            response = await client.post(
                self.token_url, data=data, headers={"Accept": "application/json"}
            )
        except httpx.HTTPError as e:
            logfire.error("GitHub token exchange HTTP error", error=str(e))
            raise GitHubOAuthError(f"HTTP error during token exchange: {e}")

        if response.status_code != 200:
            logfire.error(
                "GitHub token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GitHubOAuthError(f"Token exchange failed: {response.status_code}")

        # GitHub reports a bad code with 200 and an "error" field
        result = response.json()
        if "access_token" not in result:
            logfire.error(
                "GitHub token exchange rejected",
                error=result.get("error"),
                description=result.get("error_description"),
            )
            raise GitHubOAuthError(
                f"Token exchange rejected: {result.get('error', 'unknown error')}"
            )
        return result["access_token"]

    async def _get(
        self, client: httpx.AsyncClient, url: str, access_token: str
    ) -> httpx.Response:
        try:
            response = await client.get(
                url,
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/vnd.github+json",
                },
            )
        except httpx.HTTPError as e:
            logfire.error("GitHub API HTTP error", url=url, error=str(e))
            raise GitHubOAuthError(f"HTTP error calling GitHub: {e}")

        if response.status_code != 200:
            logfire.error(
                "GitHub API request failed",
                url=url,
                status_code=response.status_code,
                error=response.text,
            )
            raise GitHubOAuthError(f"GitHub request failed: {response.status_code}")
        return response

    async def _get_user_info(self, client: httpx.AsyncClient, access_token: str) -> dict:
        """Get the authenticated user's profile."""
        response = await self._get(client, self.user_info_url, access_token)
        return response.json()

    async def _get_primary_email(
        self, client: httpx.AsyncClient, access_token: str
    ) -> str | None:
        """Get the verified primary email when the profile hides it."""
        response = await self._get(client, self.emails_url, access_token)
        for entry in response.json():
            if entry.get("primary") and entry.get("verified"):
                return entry.get("email")
        return None


class MockGitHubOAuthClient(GitHubOAuthClient):
    """Mock GitHub OAuth client for testing.

    Returns deterministic test data without making real API calls. The
    code doubles as the GitHub login, so tests can sign in distinct users.
    """

    async def initiate_authorization(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://github.com/login/oauth/authorize?state={state}&mock=true"

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Return mock user information derived from the code."""
        login = code or "mockuser"
        return OAuthProviderInfo(
            provider=AuthProvider.GITHUB,
            provider_user_id=f"mock-{login}",
            login=login,
            email=f"{login}@example.com",
            display_name=f"Mock {login}",
            avatar_url="https://example.com/avatar.png",
        )
