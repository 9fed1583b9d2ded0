"""User identity domain service."""

from datetime import datetime

import logfire

from discuss.domain.model.user_identity import UserIdentity
from discuss.domain.repository.user_identity import UserIdentityRepository
from discuss.domain.value import AuthProvider

from .base import Service


class UserIdentityService(Service):
    """Domain service for user identity operations."""

    def __init__(self, user_identity_repository: UserIdentityRepository) -> None:
        """Initialize user identity service.

        Args:
            user_identity_repository: User identity repository
        """
        self.user_identity_repository = user_identity_repository

    async def get_identity_by_provider(
        self, provider: AuthProvider, provider_user_id: str
    ) -> UserIdentity | None:
        """Get identity by provider and provider user ID.

        Args:
            provider: Authentication provider
            provider_user_id: Provider-specific user ID

        Returns:
            Identity if found, None otherwise
        """
        with logfire.span(
            "user_identity_service.get_identity_by_provider",
            provider=provider.value,
            provider_user_id=provider_user_id,
        ):
            identity = await self.user_identity_repository.find_by_provider(
                provider, provider_user_id
            )
            if identity:
                logfire.info(
                    "Identity found",
                    provider=provider.value,
                    provider_user_id=provider_user_id,
                    user_id=str(identity.user_id),
                )
            else:
                logfire.warn(
                    "Identity not found",
                    provider=provider.value,
                    provider_user_id=provider_user_id,
                )
            return identity

    async def save(self, identity: UserIdentity) -> UserIdentity:
        """Save an identity."""
        with logfire.span(
            "user_identity_service.save", identity_id=str(identity.id)
        ):
            return await self.user_identity_repository.save(identity)

    async def record_login(self, identity: UserIdentity, login: str) -> UserIdentity:
        """Stamp a sign-in on an identity, keeping the provider login current."""
        with logfire.span(
            "user_identity_service.record_login", identity_id=str(identity.id)
        ):
            updated = identity.model_copy(
                update={"provider_login": login, "last_login_at": datetime.now()}
            )
            return await self.user_identity_repository.save(updated)
