"""OAuth infrastructure provider."""

from dishka import Scope, provide

from discuss.adapter.github.client import GitHubOAuthClient
from discuss.domain.service.auth_service import OAuthClient
from discuss.domain.value import AuthProvider
from discuss.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Provider that collects the OAuth clients into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_oauth_clients(
        self, github_oauth_client: GitHubOAuthClient
    ) -> dict[AuthProvider, OAuthClient]:
        """Provide OAuth clients by provider."""
        return {AuthProvider.GITHUB: github_oauth_client}
